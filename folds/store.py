from folds.fold import reduceWith


class Store:
    """
    Owns one piece of state. Each dispatch runs a single step of a fold:
    state = combine(state, action).
    """
    def __init__(self, combine, state):
        self._combine = combine
        self._state = state
        self._listeners = []

    @property
    def state(self):
        return self._state

    def getState(self):
        return self._state

    def dispatch(self, action):
        self._state = self._combine(self._state, action)
        for listener in list(self._listeners):
            listener(self._state)
        return self._state

    def dispatchAll(self, actions):
        return reduceWith(lambda _, action: self.dispatch(action), self._state, actions)

    def subscribe(self, listener):
        """Calls listener with the new state after each dispatch. Returns an unsubscribe function."""
        self._listeners.append(listener)
        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)
        return unsubscribe
