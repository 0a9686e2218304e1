from typing import Any, Iterable, List

Lines = Iterable[Any]


def flatten(nested: Lines) -> List[str]:
    ''' Collapses nested lists of rendered lines into one list '''

    def _flatten(items: Lines):
        for item in items:
            if isinstance(item, (list, tuple)):
                yield from _flatten(item)
            else:
                yield item

    return list(_flatten(nested))
