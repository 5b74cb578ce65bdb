import requests

from activecampaign import config
from activecampaign.context import CREDENTIALS_NAME, ExecutionContext
from activecampaign.errors import ApiError, AuthError, ConfigurationError


class ActiveCampaignClient:
    def __init__(self, context):
        self.context = context

    def request(self, method, endpoint, body, query=None, data_key=None):
        """
        Makes a request to the ActiveCampaign API.

        Args:
            method (str): HTTP method (GET, POST, etc.)
            endpoint (str): API endpoint path (e.g., '/api/3/contacts')
            body (dict): JSON body. Not sent when empty.
            query (dict, optional): Query parameters.
            data_key (str, optional): Field of the response to return instead of the whole body.

        Returns:
            dict or list: Parsed JSON response, or response[data_key] when data_key is given.

        Raises:
            ConfigurationError: If the context has no ActiveCampaign credentials.
            AuthError: If the API answers 403.
            ApiError: If the response reports success: false.
            requests.exceptions.RequestException: Any other transport failure, unchanged.
        """
        credentials = self.context.get_credentials(CREDENTIALS_NAME)
        if credentials is None:
            raise ConfigurationError("No credentials got returned!")

        if query is None:
            query = {}

        options = {
            "method": method,
            "url": f"{credentials['api_url']}{endpoint}",
            "headers": {"Api-Token": credentials["api_key"]},
            "params": query,
        }
        if body:
            options["json"] = body

        try:
            response_data = self.context.request(options)
        except requests.exceptions.HTTPError as e:
            if e.response is not None and e.response.status_code == 403:
                raise AuthError("The ActiveCampaign credentials are not valid!", cause=e) from e
            raise

        if isinstance(response_data, dict) and response_data.get("success") is False:
            raise ApiError(response_data.get("error"), response_data.get("error_info"))

        if data_key is None:
            return response_data
        return response_data.get(data_key) if isinstance(response_data, dict) else None


def load_clients(**kwargs):
    """
    Loads one ActiveCampaign client per account configured in environment variables.
    Looks for keys starting with ACTIVECAMPAIGN_API_KEY_
    """
    clients = {}
    for name, credentials in config.get_all_api_credentials().items():
        context = ExecutionContext.from_env(credentials, **kwargs)
        clients[name] = ActiveCampaignClient(context)
    return clients
