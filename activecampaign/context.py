import requests

from activecampaign import config

CREDENTIALS_NAME = "activeCampaignApi"


class ExecutionContext:
    """
    Supplies stored credentials and the HTTP transport to the API client.

    Args:
        credentials (dict, optional): Credential name -> {"api_key", "api_url"}.
        timeout (int): Seconds before a request is abandoned by requests.
    """

    def __init__(self, credentials=None, timeout=30):
        self.credentials = credentials or {}
        self.timeout = timeout

    @classmethod
    def from_env(cls, credentials=None, **kwargs):
        """Builds a context from explicit credentials, or the default account in .env."""
        if credentials is None:
            credentials = config.get_api_credentials()
        stored = {CREDENTIALS_NAME: credentials} if credentials else {}
        return cls(stored, **kwargs)

    def get_credentials(self, name):
        return self.credentials.get(name)

    def request(self, options):
        """
        Sends one HTTP request and parses the JSON response.

        Args:
            options (dict): Keyword arguments for requests.request
                (method, url, headers, params and optionally json).

        Returns:
            The decoded JSON body, or None for an empty response.

        Raises:
            requests.exceptions.HTTPError: If the response status code is not 2xx.
            requests.exceptions.RequestException: On network failures.
        """
        response = requests.request(timeout=self.timeout, **options)
        response.raise_for_status()

        if not response.content:
            return None
        return response.json()
