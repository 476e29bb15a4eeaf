"""
Newsletter publish/subscribe notification package.

The core provides:
- Subject
- Registry
- Dispatcher

Subscribers receive broadcast events; the script runner replays a
scripted sequence of subscribe, unsubscribe and notify steps.
"""

from newsletter.core.errors import DeliveryFailure, InvalidArgument
from newsletter.core.subject import Subject

# Expose the demo driver
from newsletter.script_runner import ScriptRunner
