#!/usr/bin/env python3
"""
Live environment check.
Requires an actual AD connection and WinRM access to at least one computer.
Read-only: nothing is written to the directory.
"""

import os
import sys

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from ad_description_sync.config.loader import load_config
from ad_description_sync.core.ldap_manager import LDAPManager
from ad_description_sync.tools.computer import ComputerDirectory
from ad_description_sync.tools.host import HostDescriptionQuery


def check_environment(config_path: str, pattern: str) -> bool:
    """Search the directory and query the first match over WinRM."""
    try:
        config = load_config(config_path)
        print(f"Config loaded: {config.active_directory.server}")

        with LDAPManager(config.active_directory, config.security, config.performance) as ldap_manager:
            connection_result = ldap_manager.test_connection()
            if not connection_result.get('connected'):
                print(f"Connection failed: {connection_result.get('error')}")
                return False
            print(f"Connected to: {connection_result.get('server')} as {connection_result.get('user')}")

            records = ComputerDirectory(ldap_manager).search(pattern)
            print(f"Found {len(records)} computers matching '{pattern}'")
            for record in records[:5]:
                print(f"   {record.name}: {record.directory_description!r}")

        if not records:
            return True

        host_query = HostDescriptionQuery(config.host_query)
        result = host_query.get_local_description(records[0].name)
        if result.reachable:
            print(f"{records[0].name} local description: {result.description!r}")
            return True

        print(f"{records[0].name} unreachable: {result.error}")
        return False

    except Exception as e:
        print(f"Error: {e}")
        return False


def main():
    config_path = os.environ.get('AD_DESC_SYNC_CONFIG', 'config.json')
    pattern = sys.argv[1] if len(sys.argv) > 1 else '*'

    if not os.path.exists(config_path):
        print(f"Config file not found: {config_path}")
        print("   Copy config.example.json to config.json and set AD_DESC_SYNC_CONFIG")
        sys.exit(1)

    if check_environment(config_path, pattern):
        print("\nEnvironment check successful")
    else:
        print("\nTips for troubleshooting:")
        print("   1. Check LDAP connectivity and credentials")
        print("   2. Check that WinRM is enabled on the computers (winrm quickconfig)")
        print("   3. Check firewall rules for ports 5985/5986")
        sys.exit(1)


if __name__ == "__main__":
    main()
