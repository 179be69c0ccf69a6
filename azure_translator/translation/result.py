"""
翻訳結果のデータクラス

「翻訳あり」と「翻訳なし（応答形式不一致など）」を明示的に区別する。
システム障害は例外（TranslationError 系）で表現する。
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional


class ResultStatus(str, Enum):
    """翻訳結果の状態"""

    OK = "ok"
    NO_RESULT = "no_result"


@dataclass(frozen=True)
class TranslationResult:
    """翻訳結果"""

    status: ResultStatus
    original_text: str  # 原文
    source_lang: str  # ソース言語（ベンダーコード）
    target_lang: str  # ターゲット言語（ベンダーコード）
    text: Optional[str] = None  # 翻訳テキスト（OK の場合のみ）
    protocol: Optional[str] = None  # "v2" / "v3"
    reason: Optional[str] = None  # NO_RESULT の理由
    from_cache: bool = False

    @classmethod
    def ok(
        cls,
        text: str,
        original_text: str,
        source_lang: str,
        target_lang: str,
        protocol: Optional[str] = None,
    ) -> TranslationResult:
        """翻訳成功の結果を作成"""
        return cls(
            status=ResultStatus.OK,
            text=text,
            original_text=original_text,
            source_lang=source_lang,
            target_lang=target_lang,
            protocol=protocol,
        )

    @classmethod
    def no_result(
        cls,
        original_text: str,
        source_lang: str,
        target_lang: str,
        protocol: Optional[str] = None,
        reason: Optional[str] = None,
    ) -> TranslationResult:
        """翻訳なしの結果を作成"""
        return cls(
            status=ResultStatus.NO_RESULT,
            original_text=original_text,
            source_lang=source_lang,
            target_lang=target_lang,
            protocol=protocol,
            reason=reason,
        )

    @property
    def is_ok(self) -> bool:
        """空でない翻訳テキストを持つ場合 True"""
        return self.status is ResultStatus.OK and bool(self.text)

    def as_cached(self) -> TranslationResult:
        """キャッシュから返されたことを示すコピーを返す"""
        return replace(self, from_cache=True)
