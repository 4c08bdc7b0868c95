"""Disposition 인프라 레이어 (포트 구현체)."""
