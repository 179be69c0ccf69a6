"""
言語コード正規化ユーティリティ

ホストアプリケーションの言語タグを Microsoft Translator のコードに変換する。
基本言語コードの抽出には langcodes ライブラリを使用。
"""

from __future__ import annotations

from dataclasses import dataclass

import langcodes

# Microsoft Translator のレガシー中国語コード
CHINESE_SIMPLIFIED = "zh-CHS"
CHINESE_TRADITIONAL = "zh-CHT"

_SIMPLIFIED_TAGS = frozenset({"zh-cn"})
_TRADITIONAL_TAGS = frozenset({"zh-tw", "zh-hk"})


@dataclass(frozen=True)
class LanguagePair:
    """ソース/ターゲットのベンダーコードの組"""

    source: str
    target: str


def _canonical_tag(tag: str) -> str:
    return tag.strip().replace("_", "-").lower()


def to_base_language(tag: str) -> str:
    """
    言語タグから基本言語コードを取得

    Args:
        tag: 言語タグ（"EN", "de-AT", "pt_BR" など）

    Returns:
        小文字の基本言語コード（"en", "de", "pt" など）

    Examples:
        >>> to_base_language("EN")
        'en'
        >>> to_base_language("de-AT")
        'de'
    """
    canonical = _canonical_tag(tag)
    try:
        language = langcodes.Language.get(canonical, normalize=False).language
    except ValueError:
        language = None
    if language and "-" not in language:
        return language
    # 解析できないタグと grandfathered タグ（"i-klingon" など）は先頭のサブタグを使う
    return canonical.split("-", 1)[0]


def normalize_for_microsoft(tag: str) -> str:
    """
    Microsoft Translator 用に正規化

    Note: 中国語は地域サブタグで簡体字/繁体字を区別する。
          zh-HK は繁体字として扱う。

    Args:
        tag: 言語タグ

    Returns:
        Microsoft Translator の言語コード

    Examples:
        >>> normalize_for_microsoft("zh-CN")
        'zh-CHS'
        >>> normalize_for_microsoft("zh-HK")
        'zh-CHT'
        >>> normalize_for_microsoft("EN")
        'en'
    """
    canonical = _canonical_tag(tag)
    if canonical in _SIMPLIFIED_TAGS:
        return CHINESE_SIMPLIFIED
    if canonical in _TRADITIONAL_TAGS:
        return CHINESE_TRADITIONAL
    return to_base_language(canonical)


def to_language_pair(source: str, target: str) -> LanguagePair:
    """ソース/ターゲットの言語タグを正規化してペアにする"""
    return LanguagePair(
        source=normalize_for_microsoft(source),
        target=normalize_for_microsoft(target),
    )
