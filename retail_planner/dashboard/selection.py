from typing import Callable, List, Optional

StoreListener = Callable[[Optional[str]], None]


class StoreSelection:
    """Shared selected store id, passed explicitly to the views that use it.

    Listeners are called synchronously with the new id (None when cleared)
    and only when the id actually changes. If a listener raises, the
    previous id is restored before the error propagates.
    """

    def __init__(self, store_id: Optional[str] = None):
        self._store_id = store_id
        self._listeners: List[StoreListener] = []

    @property
    def store_id(self) -> Optional[str]:
        return self._store_id

    def subscribe(self, listener: StoreListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def set(self, store_id: Optional[str]) -> None:
        store_id = store_id or None
        if store_id == self._store_id:
            return
        previous, self._store_id = self._store_id, store_id
        try:
            for listener in list(self._listeners):
                listener(store_id)
        except Exception:
            self._store_id = previous
            raise

    def clear(self) -> None:
        self.set(None)
