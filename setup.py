"""Package setup for scunet_login."""

from setuptools import setup, find_packages

setup(
    name="scunet-login",
    version="1.0.0",
    description="Login client for the SCUNET eportal captive portal",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "requests>=2.31.0",
        "urllib3>=2.0.0",
    ],
    extras_require={
        "ui": [
            "colorlog>=6.8.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "scunet-login=scunet_login.cli:main",
        ],
    },
)
