"""Load Disposition 서비스.

개별 예약된 화물(Load)을 수출/수입 포지션(Position)으로 묶고,
포지션을 draft → confirmed 상태로 확정하는 도메인 로직을 제공한다.
"""
