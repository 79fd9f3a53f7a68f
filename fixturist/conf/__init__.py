from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING, Any, cast

if TYPE_CHECKING:
    from monkay import Monkay

    from fixturist.conf.global_settings import FixturistSettings


@lru_cache
def get_fixturist_monkay() -> Monkay[None, FixturistSettings]:
    from fixturist import monkay

    return monkay


class SettingsForward:
    def __getattribute__(self, name: str) -> Any:
        monkay = get_fixturist_monkay()
        return getattr(monkay.settings, name)


settings: FixturistSettings = cast("FixturistSettings", SettingsForward())

__all__ = ["settings"]
