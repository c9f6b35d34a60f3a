"""레포지토리 패키지 - 데이터베이스 쿼리 계층.

Repository package, the database query layer.
Entity repositories extend BaseRepository for generic lookups; the
order query repositories return DTOs straight from SQL projections.
"""
