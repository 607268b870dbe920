"""
Configuration for the OMS client and its command line entry point.
"""

import os

from dotenv import load_dotenv

load_dotenv()


# OMS connection
OMS_BASE_URL = os.getenv("OMS_BASE_URL", "https://suz.sandbox.crptech.ru")
OMS_TIMEOUT = float(os.getenv("OMS_TIMEOUT", "30"))

# Transport: requests or httpx
OMS_TRANSPORT = os.getenv("OMS_TRANSPORT", "requests")

# Defaults for CLI calls
OMS_CLIENT_TOKEN = os.getenv("OMS_CLIENT_TOKEN")
OMS_ID = os.getenv("OMS_ID")
OMS_EXTENSION = os.getenv("OMS_EXTENSION", "lp")

if __name__ == "__main__":
    print(f"Base URL: {OMS_BASE_URL}")
    print(f"Transport: {OMS_TRANSPORT}")
    print(f"Extension: {OMS_EXTENSION}")
    print(f"Token set: {bool(OMS_CLIENT_TOKEN)}")
