"""Language selection and the bilingual message catalogue.

Every user-visible string the client core produces is looked up here by
key, so the UI never hard-codes English or Arabic text.
"""

from collections.abc import Callable
from datetime import date, datetime

import structlog

from storefront.errors import StorageError
from storefront.storage import KeyValueStorage

logger = structlog.get_logger(__name__)

LANGUAGE_STORAGE_KEY = "handmade_language"
DEFAULT_LANGUAGE = "en"
SUPPORTED_LANGUAGES = ("en", "ar")

MESSAGES: dict[str, dict[str, str]] = {
    # Cart
    "cart.item_added": {"en": "Product added to cart", "ar": "تم إضافة المنتج إلى السلة"},
    "cart.empty": {"en": "Your cart is empty", "ar": "سلة التسوق فارغة"},
    "cart.invalid_quantity": {"en": "Quantity must be at least 1", "ar": "يجب أن تكون الكمية 1 على الأقل"},
    # Checkout steps
    "checkout.title": {"en": "Checkout", "ar": "إتمام الطلب"},
    "checkout.step.shipping": {"en": "1. Shipping", "ar": "1. الشحن"},
    "checkout.step.payment": {"en": "2. Payment", "ar": "2. الدفع"},
    "checkout.step.review": {"en": "3. Review", "ar": "3. المراجعة"},
    # Checkout validation
    "checkout.field_required": {"en": "Please fill in all required fields", "ar": "يرجى ملء جميع الحقول المطلوبة"},
    "checkout.invalid_email": {"en": "Please enter a valid email address", "ar": "يرجى إدخال بريد إلكتروني صحيح"},
    "checkout.payment_required": {"en": "Please select a payment method", "ar": "يرجى اختيار طريقة الدفع"},
    "checkout.card_required": {"en": "Please fill in all card details", "ar": "يرجى إدخال جميع بيانات البطاقة"},
    "checkout.submission_in_progress": {
        "en": "Your order is being submitted, please wait",
        "ar": "جاري إرسال طلبك، يرجى الانتظار",
    },
    # Payment methods
    "payment.card": {"en": "Credit Card", "ar": "بطاقة ائتمان"},
    "payment.cash_voucher": {"en": "Fawry", "ar": "فوري"},
    "payment.cash_voucher_notice": {
        "en": "You will be redirected to complete payment via Fawry",
        "ar": "سيتم توجيهك لإتمام الدفع عبر فوري",
    },
    # Order outcome
    "order.success": {"en": "Your order has been placed successfully!", "ar": "تم تأكيد طلبك بنجاح!"},
    "error.generic": {"en": "An error occurred. Please try again.", "ar": "حدث خطأ. يرجى المحاولة مرة أخرى."},
    "error.network": {
        "en": "Could not reach the store. Please check your connection and try again.",
        "ar": "تعذر الاتصال بالمتجر. يرجى التحقق من الاتصال والمحاولة مرة أخرى.",
    },
    # Forms
    "form.invalid_name": {"en": "Please enter a valid name", "ar": "يرجى إدخال اسم صحيح"},
    "form.invalid_email": {"en": "Please enter a valid email address", "ar": "يرجى إدخال بريد إلكتروني صحيح"},
    "form.invalid_message": {
        "en": "Please enter a message with at least 10 characters",
        "ar": "يرجى إدخال رسالة لا تقل عن 10 أحرف",
    },
    "form.invalid_amount": {"en": "Please select a valid donation amount", "ar": "يرجى اختيار مبلغ صحيح للتبرع"},
    "form.invalid_phone": {"en": "Please enter a valid phone number", "ar": "يرجى إدخال رقم هاتف صحيح"},
    "form.invalid_location": {"en": "Please enter your governorate or area", "ar": "يرجى إدخال المحافظة أو المنطقة"},
    "form.invalid_skills": {"en": "Please select your primary skill", "ar": "يرجى اختيار مهارتك الأساسية"},
    "form.contact.success": {
        "en": "Thank you for your message! We will get back to you soon.",
        "ar": "شكرًا لرسالتك! سنتواصل معك قريبًا.",
    },
    "form.donation.success": {
        "en": "Thank you for your generous donation of {amount}!",
        "ar": "شكرًا لك على تبرعك الكريم بمبلغ {amount}!",
    },
    "form.textile_donation.success": {
        "en": "Thank you for your textile donation inquiry! We will contact you soon.",
        "ar": "شكرًا لاستفسارك حول التبرع بالمنسوجات! سنتواصل معك قريبًا.",
    },
    "form.volunteer.success": {
        "en": "Thank you for your volunteer application! We will review it and get back to you.",
        "ar": "شكرًا لطلب التطوع! سنراجعه ونتواصل معك.",
    },
    "form.join_artisan.success": {
        "en": "Thank you! We received your application and will contact you soon to start your journey with us.",
        "ar": "شكرًا لك! تم استلام طلبك وسنتواصل معك قريباً لبدء رحلتك معنا.",
    },
    "form.newsletter.success": {
        "en": "Thank you for subscribing to our newsletter!",
        "ar": "شكرًا لاشتراكك في نشرتنا الإخبارية!",
    },
}

_MONTHS = {
    "en": [
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ],
    "ar": [
        "يناير", "فبراير", "مارس", "أبريل", "مايو", "يونيو",
        "يوليو", "أغسطس", "سبتمبر", "أكتوبر", "نوفمبر", "ديسمبر",
    ],
}  # fmt: skip

_ARABIC_DIGITS = str.maketrans("0123456789", "٠١٢٣٤٥٦٧٨٩")


def to_arabic_digits(text: str) -> str:
    return text.translate(_ARABIC_DIGITS)


class LanguageManager:
    """Owns the current UI language and persists it across sessions.

    Listeners registered with ``subscribe`` are called with the new language
    after every successful switch so dynamic content can be re-rendered.
    """

    def __init__(self, storage: KeyValueStorage, default: str = DEFAULT_LANGUAGE):
        self._storage = storage
        self._listeners: list[Callable[[str], None]] = []
        self._language = self._load() or default

    def _load(self) -> str | None:
        try:
            stored = self._storage.get(LANGUAGE_STORAGE_KEY)
        except StorageError:
            logger.warning("Could not read stored language, using default")
            return None
        return stored if stored in SUPPORTED_LANGUAGES else None

    @property
    def language(self) -> str:
        return self._language

    def get_current_language(self) -> str:
        return self._language

    @property
    def is_rtl(self) -> bool:
        return self._language == "ar"

    @property
    def text_direction(self) -> str:
        return "rtl" if self.is_rtl else "ltr"

    def subscribe(self, listener: Callable[[str], None]) -> Callable[[], None]:
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    def switch_language(self, language: str) -> bool:
        """Switch to ``language``. Unsupported codes are rejected and the
        current language is kept; returns whether the switch happened."""
        if language not in SUPPORTED_LANGUAGES:
            logger.warning("Unsupported language", language=language)
            return False

        self._language = language
        try:
            self._storage.set(LANGUAGE_STORAGE_KEY, language)
        except StorageError:
            logger.warning("Could not persist language preference", language=language)

        for listener in list(self._listeners):
            listener(language)
        return True

    def toggle_language(self) -> str:
        self.switch_language("ar" if self._language == "en" else "en")
        return self._language

    def translate(self, key: str, **params) -> str:
        entry = MESSAGES.get(key)
        if entry is None:
            logger.warning("Missing message key", key=key)
            return key
        text = entry.get(self._language) or entry[DEFAULT_LANGUAGE]
        return text.format(**params) if params else text

    def localized(self, record: dict, field: str) -> str:
        """Pick ``<field>_<lang>`` from a bilingual record, falling back to
        English and then to the bare field."""
        return record.get(f"{field}_{self._language}") or record.get(f"{field}_en") or record.get(field) or ""

    def format_number(self, number: int | float) -> str:
        text = f"{number:,}" if isinstance(number, int) else f"{number:,.2f}".rstrip("0").rstrip(".")
        return to_arabic_digits(text) if self.is_rtl else text

    def format_date(self, value: date | datetime | str) -> str:
        if isinstance(value, str):
            value = datetime.fromisoformat(value)
        month = _MONTHS[self._language][value.month - 1]
        if self.is_rtl:
            return to_arabic_digits(f"{value.day} {month} {value.year}")
        return f"{month} {value.day}, {value.year}"
