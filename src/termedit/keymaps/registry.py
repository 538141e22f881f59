"""Keymap registry responsible for storing bindings per mode."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Optional

from termedit.runtime.telemetry import span

from .models import Binding


@dataclass(slots=True)
class RegistryStats:
    """Lightweight snapshot describing registry state."""

    binding_count: int
    modes: tuple[str, ...]


class KeymapConflictError(RuntimeError):
    """Raised when a new binding takes a key already bound in its mode."""

    def __init__(self, binding: Binding, conflicts: Iterable[Binding]):
        conflicts_tuple = tuple(conflicts)
        message = (
            f"Binding '{binding.id}' conflicts with {[b.id for b in conflicts_tuple]}"
        )
        super().__init__(message)
        self.binding = binding
        self.conflicts = conflicts_tuple


class KeymapRegistry:
    """Owns bindings, indexed by mode and key token."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._bindings: Dict[str, Binding] = {}
        self._mode_index: Dict[str, Dict[str, str]] = {}
        self._logger_name = logger_name
        self._revision = 0

    def revision(self) -> int:
        return self._revision

    def get_binding(self, binding_id: str) -> Binding:
        try:
            return self._bindings[binding_id]
        except KeyError as exc:
            raise KeyError(f"Binding '{binding_id}' is not registered") from exc

    def lookup(self, mode: str, token: str) -> Optional[Binding]:
        binding_id = self._mode_index.get(mode, {}).get(token)
        if binding_id is None:
            return None
        return self._bindings[binding_id]

    def register_binding(self, binding: Binding, *, replace: bool = False) -> Binding:
        with span(
            "keymaps::register_binding",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"binding_id": binding.id, "mode": binding.mode},
        ) as handle:
            conflicts = self.detect_conflicts(binding)
            if conflicts and not replace:
                handle.add_metadata(
                    "conflicts", ",".join(conflict.id for conflict in conflicts)
                )
                raise KeymapConflictError(binding, conflicts)

            if replace:
                for conflict in conflicts:
                    self._remove_binding(conflict)
                    self._bindings.pop(conflict.id, None)
                existing = self._bindings.get(binding.id)
                if existing:
                    self._remove_binding(existing)
                    self._bindings.pop(existing.id, None)
            elif binding.id in self._bindings:
                raise ValueError(f"Binding id '{binding.id}' already registered")

            self._bindings[binding.id] = binding
            self._index_binding(binding)
            self._touch_bindings()
            return binding

    def unregister_binding(self, binding_id: str) -> Optional[Binding]:
        with span(
            "keymaps::unregister_binding",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"binding_id": binding_id},
        ):
            binding = self._bindings.pop(binding_id, None)
            if not binding:
                return None
            self._remove_binding(binding)
            self._touch_bindings()
            return binding

    def iter_bindings(self, mode: Optional[str] = None) -> Iterator[Binding]:
        if mode is None:
            yield from self._bindings.values()
            return
        for binding_id in self._mode_index.get(mode, {}).values():
            yield self._bindings[binding_id]

    def stats(self) -> RegistryStats:
        return RegistryStats(
            binding_count=len(self._bindings),
            modes=tuple(sorted(self._mode_index)),
        )

    def detect_conflicts(self, binding: Binding) -> list[Binding]:
        existing_id = self._mode_index.get(binding.mode, {}).get(binding.key_signature)
        if existing_id is None or existing_id == binding.id:
            return []
        return [self._bindings[existing_id]]

    def _index_binding(self, binding: Binding) -> None:
        by_signature = self._mode_index.setdefault(binding.mode, {})
        by_signature[binding.key_signature] = binding.id

    def _remove_binding(self, binding: Binding) -> None:
        mode_bucket = self._mode_index.get(binding.mode)
        if not mode_bucket:
            return
        if mode_bucket.get(binding.key_signature) == binding.id:
            mode_bucket.pop(binding.key_signature, None)
        if not mode_bucket:
            self._mode_index.pop(binding.mode, None)

    def _touch_bindings(self) -> None:
        self._revision += 1


__all__ = [
    "KeymapRegistry",
    "KeymapConflictError",
    "RegistryStats",
]
