"""コネクタのユーザー向けメッセージを扱う軽量な i18n ユーティリティ"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)

# ホスト側で翻訳関数が登録されていない場合に使う既定メッセージ
DEFAULT_MESSAGES: Dict[str, str] = {
    "MT_ENGINE_MICROSOFT_AZURE": "Azure Microsoft Translator",
    "MT_ENGINE_MICROSOFT_SUBSCRIPTION_KEY_NOTFOUND": (
        "The Microsoft Translator subscription key was not found. "
        "Please configure credentials before translating."
    ),
    "MT_ENGINE_MICROSOFT_WRONG_RESPONSE": "Microsoft Translator returned an unexpected response.",
    "MT_ENGINE_MICROSOFT_SUBSCRIPTION_KEY_LABEL": "Subscription Key:",
    "MT_ENGINE_MICROSOFT_SUBSCRIPTION_REGION": "Region:",
    "MT_ENGINE_MICROSOFT_NEURAL_LABEL": "Use neural machine translation (V2 only)",
    "MT_ENGINE_MICROSOFT_V2_LABEL": "Use legacy V2 API",
}


@dataclass(frozen=True)
class I18nDiagnostics:
    translator_registered: bool
    translator_name: Optional[str]
    message_count: int
    message_keys_sample: Tuple[str, ...] = ()


class I18nManager:
    """ホストアプリケーションのローカライズ関数とフォールバックを仲介する"""

    def __init__(self, messages: Optional[Mapping[str, str]] = None) -> None:
        self._translator: Optional[Callable[..., str]] = None
        self._translator_name: Optional[str] = None
        self._messages: Dict[str, str] = dict(DEFAULT_MESSAGES if messages is None else messages)

    def register_translator(self, translator: Callable[..., str], *, name: Optional[str] = None) -> None:
        """ホストの翻訳関数（キー → ローカライズ済み文字列）を登録"""
        self._translator = translator
        if name is None:
            module = getattr(translator, "__module__", None)
            qualname = getattr(translator, "__qualname__", None)
            name = f"{module}.{qualname}" if module and qualname else qualname
        self._translator_name = name

    def clear_translator(self) -> None:
        """登録済み翻訳関数を解除"""
        self._translator = None
        self._translator_name = None

    def register_messages(self, mapping: Mapping[str, str]) -> None:
        """フォールバック用メッセージを追加・上書き"""
        self._messages.update(mapping)

    def get_string(self, key: str, **kwargs) -> str:
        """
        メッセージ文字列を取得

        翻訳関数が登録されていない、もしくは失敗した場合は
        フォールバック値（未登録ならキーそのもの）を使用する。
        """
        if self._translator:
            try:
                return self._translator(key, **kwargs)
            except Exception as exc:  # pragma: no cover - ログのみ
                logger.debug("Translator failed for key '%s': %s", key, exc)

        template = self._messages.get(key, key)
        if kwargs:
            try:
                return template.format(**kwargs)
            except (KeyError, IndexError, ValueError):
                return template
        return template

    def diagnostics(self, *, sample_size: int = 5) -> I18nDiagnostics:
        """登録状態を診断用に返す"""
        return I18nDiagnostics(
            translator_registered=self._translator is not None,
            translator_name=self._translator_name,
            message_count=len(self._messages),
            message_keys_sample=tuple(list(self._messages.keys())[:sample_size]),
        )


i18n = I18nManager()

get_string = i18n.get_string
register_translator = i18n.register_translator
diagnose = i18n.diagnostics

__all__ = [
    "DEFAULT_MESSAGES",
    "I18nDiagnostics",
    "I18nManager",
    "get_string",
    "register_translator",
    "diagnose",
]
