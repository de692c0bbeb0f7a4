# Standard library imports
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# External package imports
import httpx

# Local application imports
from ...core.config import get_settings

logger = logging.getLogger(__name__)

INVALID_PAYLOAD = "Catalog service returned invalid JSON"


class CatalogError(Exception):
    """Raised when the product listing cannot be fetched"""


@dataclass
class ProductPage:
    """One page of the product listing"""
    products: List[Dict[str, Any]] = field(default_factory=list)
    page: int = 1
    pages: int = 1


class CatalogClient:
    """
    HTTP client for the catalog service's product listing endpoint.

    The catalog service is a separate backend; this client only knows its
    ``GET /api/products?keyword=&pageNumber=`` contract returning
    ``{products, page, pages}``.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize catalog client.

        Args:
            base_url: Base URL for the catalog service. If None, reads from env.
            timeout: Request timeout in seconds.
            transport: Optional httpx transport (used to stub the service)
        """
        settings = get_settings()
        self.base_url = (base_url or settings.catalog_service_url).rstrip("/")
        self.timeout = timeout
        self.transport = transport

    async def list_products(self, keyword: Optional[str] = None, page_number: int = 1) -> ProductPage:
        """
        Fetch one page of products.

        Args:
            keyword: Optional search keyword (empty means all products)
            page_number: 1-based page number

        Returns:
            ProductPage with the products and pagination info

        Raises:
            CatalogError: On timeout, transport failure, non-2xx response or a
                body that is not a product page
        """
        params = {"keyword": keyword or "", "pageNumber": page_number}

        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                response = await client.get(f"{self.base_url}/api/products", params=params)
                response.raise_for_status()
                payload = response.json()
            except httpx.TimeoutException:
                logger.error(f"Timeout while listing products from {self.base_url}")
                raise CatalogError("Catalog service timed out")
            except httpx.HTTPStatusError as e:
                message = self._error_message(e.response)
                logger.error(f"Catalog service returned {e.response.status_code}: {message}")
                raise CatalogError(message)
            except httpx.HTTPError as e:
                logger.error(f"Error listing products from {self.base_url}: {e}")
                raise CatalogError(str(e))
            except ValueError:
                raise CatalogError(INVALID_PAYLOAD)

        return self._to_page(payload, page_number)

    @staticmethod
    def _to_page(payload: Any, page_number: int) -> ProductPage:
        if not isinstance(payload, dict) or not isinstance(payload.get("products", []), list):
            logger.error(f"Unexpected product listing payload: {type(payload).__name__}")
            raise CatalogError(INVALID_PAYLOAD)
        try:
            return ProductPage(
                products=list(payload.get("products", [])),
                page=int(payload.get("page", page_number)),
                pages=int(payload.get("pages", 1)),
            )
        except (TypeError, ValueError):
            logger.error(f"Bad pagination in product listing: page={payload.get('page')!r} pages={payload.get('pages')!r}")
            raise CatalogError(INVALID_PAYLOAD)

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        """Prefer the server's own message over the generic status text."""
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            for key in ("message", "detail"):
                if isinstance(body.get(key), str) and body[key]:
                    return body[key]
        return f"Request failed with status code {response.status_code}"
