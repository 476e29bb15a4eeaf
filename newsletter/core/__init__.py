"""
Publish/subscribe notification core: registry, dispatcher and subject.
"""

from newsletter.core.dispatcher import Dispatcher
from newsletter.core.errors import DeliveryFailure, InvalidArgument
from newsletter.core.registry import Registry
from newsletter.core.subject import Subject

__all__ = [
    "DeliveryFailure",
    "Dispatcher",
    "InvalidArgument",
    "Registry",
    "Subject",
]
