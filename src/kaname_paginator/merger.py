"""設定レイヤーのマージ"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def merge_layers(*layers: Mapping[str, Any]) -> dict[str, Any]:
    """後のレイヤーを優先して設定辞書を重ね合わせる。

    ネストした辞書はキー単位で再帰的にマージし、それ以外の値（リストを含む）は置換する。
    入力は変更しない。
    """
    merged: dict[str, Any] = {}
    for layer in layers:
        for key, value in layer.items():
            current = merged.get(key)
            if isinstance(current, dict) and isinstance(value, Mapping):
                merged[key] = merge_layers(current, value)
            elif isinstance(value, Mapping):
                merged[key] = merge_layers(value)
            else:
                merged[key] = value
    return merged
