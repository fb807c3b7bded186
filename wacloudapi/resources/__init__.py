"""One API class per Graph API resource; obtained from ``WhatsAppClient``."""

from .analytics import AnalyticsApi, Granularity
from .block import BlockApi
from .flows import FlowAction, FlowCategory, FlowsApi
from .media import MediaApi, MediaType, validate_media
from .messages import (
    Button,
    Contact,
    ContactName,
    ContactPhone,
    ListRow,
    ListSection,
    MediaObject,
    MessagesApi,
    TemplateComponent,
    TemplateParameter,
)
from .phone_numbers import BusinessProfileUpdate, CodeMethod, PhoneNumbersApi
from .products import ProductSection, ProductsApi
from .qr_codes import QrCodesApi, QrImageFormat
from .templates import (
    CreateTemplate,
    HeaderFormat,
    TemplateButton,
    TemplateCategory,
    TemplatesApi,
    TemplateStatus,
)
from .typing_indicator import TypingApi
from .waba import WabaApi
from .webhook_subscriptions import SubscriptionField, WebhookSubscriptionsApi

__all__ = [
    "AnalyticsApi",
    "BlockApi",
    "BusinessProfileUpdate",
    "Button",
    "CodeMethod",
    "Contact",
    "ContactName",
    "ContactPhone",
    "CreateTemplate",
    "FlowAction",
    "FlowCategory",
    "FlowsApi",
    "Granularity",
    "HeaderFormat",
    "ListRow",
    "ListSection",
    "MediaApi",
    "MediaObject",
    "MediaType",
    "MessagesApi",
    "PhoneNumbersApi",
    "ProductSection",
    "ProductsApi",
    "QrCodesApi",
    "QrImageFormat",
    "SubscriptionField",
    "TemplateButton",
    "TemplateCategory",
    "TemplateComponent",
    "TemplateParameter",
    "TemplateStatus",
    "TemplatesApi",
    "TypingApi",
    "WabaApi",
    "WebhookSubscriptionsApi",
    "validate_media",
]
