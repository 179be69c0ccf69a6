#!/usr/bin/env python3
"""基本的な翻訳の例.

Azure Translator を使った最小構成のサンプルです。
インターネット接続とサブスクリプションキーが必要です。

使用方法:
    python examples/basic_translation.py

    # カスタムテキストを指定
    python examples/basic_translation.py "Text to translate"

環境変数:
    AZURE_TRANSLATOR_KEY: サブスクリプションキー（必須）
    AZURE_TRANSLATOR_REGION: リソースのリージョン（V3）
    AZURE_TRANSLATOR_V2: 1 でレガシー V2 API を使用
    SOURCE_LANG: ソース言語、デフォルト: en
    TARGET_LANG: ターゲット言語、デフォルト: de
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

# プロジェクトルートをパスに追加
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def main() -> None:
    """メイン処理."""
    source_lang = os.getenv("SOURCE_LANG", "en")
    target_lang = os.getenv("TARGET_LANG", "de")

    if len(sys.argv) > 1:
        text = sys.argv[1]
    else:
        text = "Buy tomorrow"

    print("=== Basic Translation Example (Azure Translator) ===")
    print(f"Source language: {source_lang}")
    print(f"Target language: {target_lang}")
    print(f"Input text: {text}")
    print()

    from azure_translator import (
        MemoryPreferenceStore,
        TranslationConfigError,
        TranslationNetworkError,
        TranslationService,
    )

    store = MemoryPreferenceStore.from_env()

    with TranslationService(store) as service:
        print(f"Protocol: {service.selected_protocol().value}")
        print()

        print("=== Translation Result ===")
        try:
            result = service.translate_result(source_lang, target_lang, text)
        except TranslationConfigError as e:
            print(f"Error: {e}")
            print("Please set AZURE_TRANSLATOR_KEY")
            sys.exit(1)
        except TranslationNetworkError as e:
            print(f"Error during translation: {e}")
            sys.exit(1)

        if not result.is_ok:
            print(f"No translation: {result.reason}")
            sys.exit(1)
        print(f"Original ({result.source_lang}): {result.original_text}")
        print(f"Translated ({result.target_lang}): {result.text}")
        print()

        # 2 回目はキャッシュから返る
        print("=== Cached Translation ===")
        cached = service.translate_result(source_lang, target_lang, text)
        print(f"From cache: {cached.from_cache}")
        print(f"Cache stats: {service.cache.stats()}")

        service.on_project_closed()


if __name__ == "__main__":
    main()
