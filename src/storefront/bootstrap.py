"""Wire the storefront client services together.

Everything is constructed once here and passed by reference. Callers that
need a different data source or storage (tests, previews) pass their own.
"""

from dataclasses import dataclass

import structlog

from storefront.cart.store import CartStore
from storefront.checkout.machine import CheckoutStateMachine
from storefront.checkout.submission import OrderSubmissionClient
from storefront.controller import StorefrontController
from storefront.forms import FormService
from storefront.gateway import ApiGateway, CachingGateway, FallbackGateway, StaticGateway, StorefrontGateway, TTLCache
from storefront.i18n import LanguageManager
from storefront.notifier import Notifier
from storefront.settings import StorefrontSettings
from storefront.storage import JsonFileStorage, KeyValueStorage, MemoryStorage

logger = structlog.get_logger(__name__)


@dataclass
class Storefront:
    settings: StorefrontSettings
    storage: KeyValueStorage
    language: LanguageManager
    notifier: Notifier
    gateway: StorefrontGateway
    cart: CartStore
    submission: OrderSubmissionClient
    checkout: CheckoutStateMachine
    forms: FormService
    controller: StorefrontController

    async def aclose(self) -> None:
        await self.gateway.aclose()


def build_gateway(settings: StorefrontSettings) -> StorefrontGateway:
    if settings.use_static_data or not settings.api_url:
        gateway: StorefrontGateway = StaticGateway()
    else:
        gateway = FallbackGateway(
            primary=ApiGateway(settings.api_url, timeout=settings.timeout),
            fallback=StaticGateway(),
        )
    return CachingGateway(gateway, TTLCache(ttl=settings.cache_ttl))


def build_storefront(
    settings: StorefrontSettings | None = None,
    storage: KeyValueStorage | None = None,
    gateway: StorefrontGateway | None = None,
) -> Storefront:
    settings = settings or StorefrontSettings.from_env()
    if storage is None:
        storage = JsonFileStorage(settings.storage_path) if settings.storage_path else MemoryStorage()
    if gateway is None:
        gateway = build_gateway(settings)

    language = LanguageManager(storage)
    notifier = Notifier(language)
    cart = CartStore(storage, notifier)
    submission = OrderSubmissionClient(cart, gateway)
    checkout = CheckoutStateMachine(cart, submission, notifier, language, currency=settings.currency)
    forms = FormService(gateway, notifier, currency=settings.currency)
    controller = StorefrontController(cart, checkout, language, notifier)

    logger.info(
        "Storefront ready",
        gateway=type(gateway).__name__,
        storage=type(storage).__name__,
        language=language.language,
        cart_items=cart.get_item_count(),
    )
    return Storefront(
        settings=settings,
        storage=storage,
        language=language,
        notifier=notifier,
        gateway=gateway,
        cart=cart,
        submission=submission,
        checkout=checkout,
        forms=forms,
        controller=controller,
    )
