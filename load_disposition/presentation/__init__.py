"""Disposition 표현 계층 (API 파사드, CLI)."""

from load_disposition.presentation.disposition_api import DispositionApi

__all__ = ["DispositionApi"]
