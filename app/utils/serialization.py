"""엔티티 직접 직렬화 유틸리티 모듈.

Entity serialization utility used only by the "V1" endpoints, which expose
ORM entities directly to show why that is a bad idea.

Rules (Jackson + Hibernate5Module 과 같은 동작):
    - 초기화되지 않은 지연 로딩 연관관계는 null (Unloaded lazy associations become null)
    - 모델의 __json_ignore__ 에 있는 연관관계는 제외 (Inverse sides listed in
      __json_ignore__ are skipped, otherwise bidirectional links recurse forever)
    - 직렬화 중에는 추가 쿼리를 절대 발생시키지 않음 (Never triggers a load)
"""

from typing import Any

from sqlalchemy import inspect

from app.database import Base


def entity_to_dict(entity: Base) -> dict[str, Any]:
    """ORM 엔티티를 로딩된 상태 그대로 딕셔너리로 변환합니다.

    Convert an ORM entity into a dict using only its already-loaded state.

    Args:
        entity: SQLAlchemy 매핑 인스턴스 (Mapped instance)

    Returns:
        dict[str, Any]: 컬럼, 임베디드 값, 로딩된 연관관계
                        (Columns, composites and loaded relationships)
    """
    state = inspect(entity)
    mapper = state.mapper
    unloaded: set[str] = set(state.unloaded)
    ignored: frozenset[str] = getattr(entity, "__json_ignore__", frozenset())
    data: dict[str, Any] = {}

    # 임베디드 값 타입 - Composite (embedded) values
    composite_columns: set[Any] = set()
    for prop in mapper.composites:
        composite_columns.update(prop.columns)
        data[prop.key] = getattr(entity, prop.key)

    for prop in mapper.column_attrs:
        if prop.columns[0] in composite_columns or prop.key in unloaded:
            continue
        data[prop.key] = state.dict.get(prop.key)

    for rel in mapper.relationships:
        if rel.key in ignored:
            continue
        if rel.key in unloaded:
            # 프록시 대신 null - Lazy association not initialized
            data[rel.key] = None
            continue
        value: Any = state.dict.get(rel.key)
        if value is None:
            data[rel.key] = None
        elif rel.uselist:
            data[rel.key] = [entity_to_dict(child) for child in value]
        else:
            data[rel.key] = entity_to_dict(value)

    return data
