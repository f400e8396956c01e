"""Callback registry mirroring the host's module component extension."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from querent.models import ModuleExtension, Variant

logger = logging.getLogger(__name__)

FinalizeDslCallback = Callable[[Optional[ModuleExtension]], None]
VariantCallback = Callable[[Variant], None]
AfterVariantsCallback = Callable[[], None]


class AndroidComponents:
    """Holds the callbacks registered by blueprints, in registration order.

    Callbacks are only *stored* here; :class:`~querent.host.project.Project`
    decides when they fire. Exceptions raised by a callback propagate
    unchanged and abort the remaining callbacks.
    """

    def __init__(self) -> None:
        self._finalize_dsl: list[FinalizeDslCallback] = []
        self._on_variants: list[VariantCallback] = []
        self._after_variants: list[AfterVariantsCallback] = []

    def finalize_dsl(self, callback: FinalizeDslCallback) -> None:
        """Register *callback* to run once the module configuration is final."""
        self._finalize_dsl.append(callback)

    def on_variants(self, callback: VariantCallback) -> None:
        """Register *callback* to run once per reported variant."""
        self._on_variants.append(callback)

    def after_variants(self, callback: AfterVariantsCallback) -> None:
        """Register *callback* to run after the last variant was reported."""
        self._after_variants.append(callback)

    def run_finalize_dsl(self, extension: Optional[ModuleExtension]) -> None:
        for callback in self._finalize_dsl:
            callback(extension)

    def run_on_variants(self, variant: Variant) -> None:
        logger.debug("Variant '%s' available", variant.name)
        for callback in self._on_variants:
            callback(variant)

    def run_after_variants(self) -> None:
        for callback in self._after_variants:
            callback()
