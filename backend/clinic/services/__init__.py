from .email_delivery import (
    EmailDeliveryClient,
    EmailDeliveryError,
    TemplateMissingError,
    send_template_email,
)
