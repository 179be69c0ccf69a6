"""
翻訳リクエスタのファクトリー

RequesterFactory はプロトコルIDからリクエスタを作成する。
TranslationService はプロトコル切り替えのたびにここで新しいインスタンスを得る。
"""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING

from .metadata import ProtocolMetadata

if TYPE_CHECKING:
    from .base import BaseRequester


class RequesterFactory:
    """翻訳リクエスタを作成するファクトリークラス"""

    @classmethod
    def create_requester(
        cls,
        protocol_id: str,
        **requester_options,
    ) -> BaseRequester:
        """
        指定されたプロトコルのリクエスタを作成

        Args:
            protocol_id: プロトコルID
                利用可能: v2, v3
            **requester_options: リクエスタ固有のパラメータ
                （preferences, client, url, token_url, auth など）

        Returns:
            BaseRequester のインスタンス

        Raises:
            ValueError: 不明なプロトコルが指定された場合

        Examples:
            >>> requester = RequesterFactory.create_requester(
            ...     "v3",
            ...     preferences=store,
            ...     client=httpx.Client(),
            ...     auth="key",
            ... )
        """
        metadata = ProtocolMetadata.get(protocol_id)
        if metadata is None:
            available = ProtocolMetadata.list_protocol_ids()
            raise ValueError(
                f"Unknown protocol: {protocol_id}. " f"Available: {available}"
            )

        # default_params と options をマージ
        params = {**metadata.default_params, **requester_options}

        module = importlib.import_module(metadata.module, package="azure_translator.translation")
        requester_class = getattr(module, metadata.class_name)
        return requester_class(**params)

    @classmethod
    def list_available_protocols(cls) -> list[str]:
        """
        利用可能なプロトコルのリストを取得

        Returns:
            プロトコルIDのリスト
        """
        return ProtocolMetadata.list_protocol_ids()
