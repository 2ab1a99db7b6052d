"""
Per-result log that travels with the content a plugin returns.
"""

from typing import Optional
from dataclasses import dataclass, field
from datetime import datetime as datetime_
from enum import Enum

from sanjua.util import now


class LoggingContext(Enum):
    """Categories under which messages are collected."""

    ERROR = "ERRORS"
    WARNING = "WARNINGS"
    INFO = "INFO"


@dataclass
class LogMessage:
    """
    Single log entry.

    Keyword arguments:
    body -- message text
    origin -- name of the component that wrote the entry
    datetime -- time of creation
                (default now)
    """

    body: str
    origin: str
    datetime: datetime_ = field(default_factory=now)

    @property
    def json(self) -> dict[str, str]:
        """Returns entry as `JSONObject`."""
        return {
            "datetime": self.datetime.isoformat(),
            "origin": self.origin,
            "body": self.body,
        }

    @classmethod
    def from_json(cls, json) -> "LogMessage":
        """Restores entry from its `json`-representation."""
        return cls(
            body=json["body"],
            origin=json["origin"],
            datetime=datetime_.fromisoformat(json["datetime"]),
        )


class Logger:
    """
    Collects `LogMessage`s grouped by `LoggingContext`.

    Keyword arguments:
    default_origin -- origin used for messages logged without one
                      (default None)
    """

    def __init__(self, default_origin: Optional[str] = None) -> None:
        self.default_origin = default_origin
        self.report: dict[LoggingContext, list[LogMessage]] = {}

    def log(
        self, context: LoggingContext, body: str, origin: Optional[str] = None
    ) -> LogMessage:
        """
        Appends a message to `context` and returns it.

        Keyword arguments:
        context -- category of the message
        body -- message text
        origin -- origin override
                  (default None; falls back to `default_origin`)
        """
        if not isinstance(context, LoggingContext):
            raise TypeError(
                f"Bad logging context '{context}' (expected "
                + f"'{LoggingContext.__name__}')."
            )
        msg = LogMessage(body, origin or self.default_origin or "unknown")
        self.report.setdefault(context, []).append(msg)
        return msg

    @property
    def json(self) -> dict[str, list[dict[str, str]]]:
        """Returns log as `JSONObject` keyed by context name."""
        return {
            context.name: [msg.json for msg in msgs]
            for context, msgs in self.report.items()
        }

    @classmethod
    def from_json(cls, json) -> "Logger":
        """Restores log from its `json`-representation."""
        logger = cls()
        for name, msgs in json.items():
            logger.report[LoggingContext[name]] = [
                LogMessage.from_json(msg) for msg in msgs
            ]
        return logger

    def __contains__(self, context):
        return context in self.report

    def __getitem__(self, context):
        return self.report[context]

    def __len__(self):
        return sum(len(msgs) for msgs in self.report.values())
