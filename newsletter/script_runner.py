"""
Script runner for the newsletter notification demo.

Responsibilities:

- Load a notification script from YAML, or fall back to the built-in
  welcome script
- Validate that every step names a known action and subscriber
- Replay the steps against a Subject, in file order
- Remain agnostic about what subscribers do with an event
"""

import copy
from collections.abc import Callable
from pathlib import Path
from typing import Any, Dict, List

import yaml

from newsletter.core.errors import DeliveryFailure
from newsletter.core.subject import Subject
from newsletter.subscribers.user import User

ACTIONS = ("subscribe", "unsubscribe", "notify")

WELCOME_MESSAGE = "Welcome to our Youtube Newsletter!"

DEFAULT_SCRIPT: Dict[str, Any] = {
    "id": "welcome",
    "subscribers": ["Alice", "Bob"],
    "steps": [
        {"subscribe": "Alice"},
        {"subscribe": "Bob"},
        {"notify": WELCOME_MESSAGE},
    ],
}


class ScriptRunner:
    """
    Replays a single notification script against a Subject.
    """

    def __init__(
        self,
        subject: Subject,
        script_path: Path | None = None,
        subscriber_factory: Callable[[str], Any] = User,
    ) -> None:
        self.subject = subject
        self.script_path = script_path
        self.subscriber_factory = subscriber_factory
        self.script: Dict[str, Any] = {}
        self.handles: Dict[str, Any] = {}

    def load(self) -> None:
        """
        Load the script from disk, or the default script when no path was
        given, and validate its structure.
        """
        if self.script_path is None:
            self.script = copy.deepcopy(DEFAULT_SCRIPT)
        else:
            with self.script_path.open("r", encoding="utf-8") as fh:
                self.script = yaml.safe_load(fh)

        if not isinstance(self.script, dict):
            raise ValueError("Script file must be a YAML mapping (dict)")

        if "steps" not in self.script:
            raise ValueError("Script is missing a 'steps' section")

        if not isinstance(self.script["steps"], list):
            raise ValueError("'steps' must be a list of actions")

        names = self.script.setdefault("subscribers", [])
        if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
            raise ValueError("'subscribers' must be a list of names")

        for index, step in enumerate(self.script["steps"]):
            self._validate_step(index, step, names)

    @staticmethod
    def _validate_step(index: int, step: Any, names: List[str]) -> None:
        if not isinstance(step, dict) or len(step) != 1:
            raise ValueError(f"Step {index} must be a mapping with exactly one action")

        action, argument = next(iter(step.items()))
        if action not in ACTIONS:
            raise ValueError(
                f"Step {index} has unknown action {action!r}; expected one of {', '.join(ACTIONS)}"
            )

        if action != "notify" and argument not in names:
            raise ValueError(f"Step {index} references undeclared subscriber {argument!r}")

    def run(self) -> List[DeliveryFailure]:
        """
        Run every step of the loaded script.

        Returns:
            Delivery failures collected from all notify steps. Only
            non-empty when the subject isolates failures; otherwise the
            first fault propagates out of this call.
        """
        self.handles = {
            name: self.subscriber_factory(name)
            for name in self.script.get("subscribers", [])
        }
        failures: List[DeliveryFailure] = []

        for step in self.script.get("steps", []):
            action, argument = next(iter(step.items()))

            if action == "subscribe":
                self.subject.subscribe(self.handles[argument])
            elif action == "unsubscribe":
                self.subject.unsubscribe(self.handles[argument])
            else:
                failures.extend(self.subject.notify(argument))

        return failures
