"""공통 유틸리티 패키지 — JWT, password hashing and HTTP exceptions."""
