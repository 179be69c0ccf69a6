"""
翻訳プロトコルのメタデータ管理

V2 / V3 プロトコルの登録情報とファクトリー生成用メタデータを管理する。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class ProtocolVersion(str, Enum):
    """翻訳プロトコルの種別"""

    LEGACY = "v2"
    CURRENT = "v3"


@dataclass
class ProtocolInfo:
    """翻訳プロトコルのメタデータ"""

    protocol_id: str
    display_name: str
    description: str
    module: str  # e.g., ".impl.legacy_v2"
    class_name: str  # e.g., "LegacyV2Requester"
    url_config_key: str  # config["endpoints"] のキー
    supports_neural: bool = False  # category=generalnn を送れるか
    default_params: Dict[str, Any] = field(default_factory=dict)


class ProtocolMetadata:
    """翻訳プロトコルのメタデータ管理"""

    _PROTOCOLS: Dict[str, ProtocolInfo] = {
        ProtocolVersion.LEGACY.value: ProtocolInfo(
            protocol_id=ProtocolVersion.LEGACY.value,
            display_name="Microsoft Translator V2",
            description="Legacy XML API (GET + bearer token from the issueToken endpoint)",
            module=".impl.legacy_v2",
            class_name="LegacyV2Requester",
            url_config_key="v2_url",
            supports_neural=True,
        ),
        ProtocolVersion.CURRENT.value: ProtocolInfo(
            protocol_id=ProtocolVersion.CURRENT.value,
            display_name="Azure Translator V3",
            description="JSON REST API (subscription key + region headers, or bearer token)",
            module=".impl.current_v3",
            class_name="CurrentV3Requester",
            url_config_key="v3_url",
            default_params={"auth": "key"},
        ),
    }

    @classmethod
    def get(cls, protocol_id: str) -> Optional[ProtocolInfo]:
        """
        プロトコルのメタデータを取得

        Args:
            protocol_id: プロトコルID（"v2" / "v3"）

        Returns:
            ProtocolInfo、見つからない場合は None
        """
        return cls._PROTOCOLS.get(protocol_id)

    @classmethod
    def get_all(cls) -> Dict[str, ProtocolInfo]:
        """全てのプロトコルメタデータを取得"""
        return cls._PROTOCOLS.copy()

    @classmethod
    def list_protocol_ids(cls) -> List[str]:
        """登録済みプロトコルIDのリストを取得"""
        return list(cls._PROTOCOLS.keys())
