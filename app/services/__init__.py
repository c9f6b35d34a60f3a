"""서비스 패키지 - 비즈니스 로직 계층.

Service package, the business logic layer.
Services call repositories for DB operations and own the write rules
(stock checks, duplicate names, cancellation). Read strategies for
orders live in order_read_service.
"""
