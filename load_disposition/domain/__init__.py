"""Disposition 도메인 레이어.

엔티티, 값 객체, 도메인 이벤트, 예외를 정의한다.
외부 I/O 의존성은 없다.
"""
