"""HTTP 미들웨어 패키지."""
