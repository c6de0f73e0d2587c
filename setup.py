"""
Setup script for AD Description Sync.
"""

from setuptools import setup, find_packages

setup(
    name="ad-description-sync",
    version="0.1.0",
    description="Reconcile Active Directory computer descriptions with the description stored on each computer",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.9",
    install_requires=[
        "ldap3>=2.9",
        "pydantic>=2.0",
        # Kerberos backs the blank-credential (current identity) path:
        # WinRM through requests-kerberos, LDAP SASL/GSSAPI through gssapi
        # or winkerberos.
        "pywinrm[kerberos]>=0.4.3",
        "gssapi>=1.6.0; sys_platform != 'win32'",
        "winkerberos>=0.7.0; sys_platform == 'win32'",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "ad-description-sync=ad_description_sync.app:main",
        ],
    },
)
