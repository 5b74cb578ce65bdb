"""
Helper function to fetch ALL items from offset-paginated ActiveCampaign API endpoints
"""

PAGE_LIMIT = 100


def _total(response):
    """Returns meta.total as a number, or None when the response does not report a usable one."""
    if not isinstance(response, dict):
        return None
    meta = response.get('meta')
    if not isinstance(meta, dict) or meta.get('total') is None:
        return None
    # The API reports totals as strings on most list endpoints ("250", sometimes "250.0")
    try:
        return float(meta['total'])
    except (TypeError, ValueError):
        return None


def fetch_all_items(client, method, endpoint, body, query=None, data_key=None):
    """
    Fetch all items from a paginated ActiveCampaign API endpoint.

    Caller-supplied limit/offset are overwritten: pages are always requested
    100 at a time starting from offset 0.

    Args:
        client: ActiveCampaignClient instance
        method: HTTP method
        endpoint: API endpoint path (e.g., '/api/3/contacts')
        body: JSON body sent with every page request
        query: Dict of query parameters (optional, not modified)
        data_key: Response field holding the page items; None if the response is the list itself

    Returns:
        list: All items from all pages

    Raises:
        Any error from client.request; items from earlier pages are discarded.
    """
    params = dict(query) if query else {}
    params['limit'] = PAGE_LIMIT
    params['offset'] = 0

    all_items = []
    items_received = 0
    page = 1

    while True:
        response = client.request(method, endpoint, body, params)

        if data_key is None:
            items = response if isinstance(response, list) else None
        else:
            items = response.get(data_key) if isinstance(response, dict) else None
        if items is None:
            items = []

        all_items.extend(items)
        items_received += len(items)
        params['offset'] = items_received
        print(f"  📄 Page {page}: {len(items)} items (total so far: {items_received})")

        total = _total(response)
        if total is None or total <= items_received:
            break

        # A page without items can never advance the offset
        if not items:
            break

        page += 1

    return all_items
