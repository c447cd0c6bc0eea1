import logging
import requests
from app.errors import UpstreamError

logger = logging.getLogger(__name__)

USER_AGENT = 'WeatherGateway/1.0'


class UpstreamClient:
    """Thin GET wrapper shared by every provider integration. No retries."""

    def __init__(self, timeout=None):
        self.timeout = timeout

    def get(self, url, params=None):
        """GET ``url`` and return the decoded JSON body, or raise UpstreamError."""
        try:
            resp = requests.get(
                url,
                params=params,
                timeout=self.timeout,
                headers={'User-Agent': USER_AGENT},
            )
            resp.raise_for_status()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            message = _provider_message(e.response)
            logger.warning(f"Upstream {url} returned {status}: {message}")
            if status is None or not message:
                raise UpstreamError(f"Upstream returned {status}") from e
            raise UpstreamError(message, provider_status=status) from e
        except requests.RequestException as e:
            logger.warning(f"Upstream {url} unreachable: {e}")
            raise UpstreamError(f"Upstream request failed: {e}") from e

        try:
            return resp.json()
        except ValueError as e:
            logger.warning(f"Upstream {url} returned a non-JSON body")
            raise UpstreamError('Malformed upstream response') from e


def _provider_message(response):
    """Pull the provider's own error message out of an error body, if any."""
    if response is None:
        return None
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        message = body.get('message')
        if message is None and isinstance(body.get('error'), dict):
            message = body['error'].get('message')
        return str(message) if message is not None else None
    return None
