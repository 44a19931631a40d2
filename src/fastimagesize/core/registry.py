"""Probe registry mapping extension/MIME tokens to probes."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

from fastimagesize.exceptions import RegistryError

if TYPE_CHECKING:
    from fastimagesize.core.source import DataSource
    from fastimagesize.probes.base import BaseProbe


@dataclass(frozen=True)
class ProbeRegistration:
    """A format name, the tokens it answers to and its probe class."""

    name: str
    tokens: tuple[str, ...]
    factory: type["BaseProbe"]

    @classmethod
    def from_probe(cls, probe_class: type["BaseProbe"]) -> "ProbeRegistration":
        return cls(
            name=probe_class.name,
            tokens=tuple(t.lower() for t in probe_class.supported_tokens),
            factory=probe_class,
        )


class ProbeRegistry:
    """Registry for the probes of one detection engine.

    The registration table is fixed once the engine is built. Probe
    instances are created lazily and shared by every token of their
    format.
    """

    def __init__(
        self,
        reader: "DataSource",
        probes: Iterable[type["BaseProbe"]] = (),
        disabled: Iterable[str] = (),
    ) -> None:
        self._reader = reader
        self._disabled = frozenset(disabled)
        self._registrations: dict[str, ProbeRegistration] = {}
        self._token_map: dict[str, str] = {}
        self._instances: dict[str, "BaseProbe"] = {}
        self._class_map: dict[str, "BaseProbe"] = {}

        for probe_class in probes:
            self.register(probe_class)

    def register(self, probe_class: type["BaseProbe"]) -> type["BaseProbe"]:
        """Register a probe class.

        Raises:
            RegistryError: If the name or one of its tokens is taken.
        """
        registration = ProbeRegistration.from_probe(probe_class)
        if registration.name in self._registrations:
            raise RegistryError(f"Probe '{registration.name}' already registered")

        for token in registration.tokens:
            owner = self._token_map.get(token)
            if owner is not None:
                raise RegistryError(
                    f"Token '{token}' of probe '{registration.name}' "
                    f"already maps to '{owner}'"
                )

        self._registrations[registration.name] = registration
        for token in registration.tokens:
            self._token_map[token] = registration.name

        return probe_class

    def resolve_token(self, token: str) -> "BaseProbe | None":
        """Get the probe for an extension or MIME subtype token."""
        token = token.lower()
        probe = self._class_map.get(token)
        if probe is not None:
            return probe

        name = self._token_map.get(token)
        if name is None or name in self._disabled:
            return None

        return self._load(name)

    def load_all(self) -> list["BaseProbe"]:
        """Construct every enabled probe, in registration order."""
        return [
            self._load(name)
            for name in self._registrations
            if name not in self._disabled
        ]

    def _load(self, name: str) -> "BaseProbe":
        probe = self._instances.get(name)
        if probe is not None:
            return probe

        registration = self._registrations[name]
        probe = registration.factory(self._reader)
        self._instances[name] = probe
        for token in registration.tokens:
            self._class_map[token] = probe
        return probe

    def list_probes(self) -> list[dict]:
        """List all registered probes."""
        return [
            {
                "name": name,
                "format": registration.factory.format.value,
                "tokens": registration.tokens,
                "enabled": name not in self._disabled,
            }
            for name, registration in self._registrations.items()
        ]

    def get_supported_tokens(self) -> list[str]:
        """Get all tokens of enabled probes."""
        return [
            token
            for token, name in self._token_map.items()
            if name not in self._disabled
        ]
