"""서비스 패키지 — 비즈니스 로직 계층.

Service package — Business logic layer.
Services fetch entities through repositories, enforce ownership and
like/comment rules, and raise HTTP exceptions for the routers to surface.
"""
