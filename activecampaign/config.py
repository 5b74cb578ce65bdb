import os
from dotenv import load_dotenv

load_dotenv()

API_KEY_PREFIX = "ACTIVECAMPAIGN_API_KEY"
API_URL_PREFIX = "ACTIVECAMPAIGN_API_URL"


def _build_credentials(api_key, api_url):
    return {
        "api_key": api_key.strip(),
        "api_url": api_url.strip().rstrip("/"),
    }


def get_api_credentials():
    """
    Retrieves the default ActiveCampaign account from environment variables.

    Returns:
        dict or None: {"api_key", "api_url"}, or None if either variable is unset.
    """
    api_key = os.getenv(API_KEY_PREFIX, "").strip()
    api_url = os.getenv(API_URL_PREFIX, "").strip()
    if not api_key or not api_url:
        return None
    return _build_credentials(api_key, api_url)


def get_all_api_credentials():
    """
    Retrieves every named ActiveCampaign account from environment variables.

    Looks for ACTIVECAMPAIGN_API_KEY_<NAME> and pairs it with
    ACTIVECAMPAIGN_API_URL_<NAME>. The returned keys are display names,
    e.g. ACTIVECAMPAIGN_API_KEY_NORTH_STORE -> "North Store".
    """
    accounts = {}
    for key, val in os.environ.items():
        if not key.startswith(f"{API_KEY_PREFIX}_"):
            continue

        suffix = key[len(API_KEY_PREFIX) + 1:]
        if not suffix:
            continue
        url_var = f"{API_URL_PREFIX}_{suffix}"
        api_url = os.getenv(url_var, "").strip()
        if not api_url:
            raise ValueError(f"Environment variable {url_var} is not set.")

        name = suffix.replace("_", " ").title()
        accounts[name] = _build_credentials(val, api_url)

    if not accounts:
        raise ValueError(f"No environment variables starting with {API_KEY_PREFIX}_ found.")
    return accounts
