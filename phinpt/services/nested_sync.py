"""
Синхронизация вложенных упорядоченных коллекций (план → день → упражнение → подход,
план → приём пищи → продукт).

Дочерние элементы сопоставляются по стабильному id: совпавшие обновляются на месте,
элементы без id (или с чужим id) создаются заново, отсутствующие во входных данных
удаляются через delete-orphan. Поле порядка всегда переписывается плотной
последовательностью 1..n в порядке входного списка.
"""
from typing import Any, Callable, List, Sequence, TypeVar

Child = TypeVar("Child")


def sync_ordered(
        current: Sequence[Child],
        incoming: Sequence[Any],
        factory: Callable[[], Child],
        apply: Callable[[Child, Any], None],
        order_field: str,
) -> List[Child]:
    by_id = {child.id: child for child in current}
    synced = []
    for position, data in enumerate(incoming, start=1):
        child = by_id.pop(data.id, None) if data.id else None
        if child is None:
            child = factory()
        setattr(child, order_field, position)
        apply(child, data)
        synced.append(child)
    return synced
