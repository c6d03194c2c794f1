class StoreUnavailable(Exception):
    """The expense store could not answer a query."""


class InvalidBudget(ValueError):
    pass


class InvalidCategory(ValueError):
    pass


class DuplicateCategory(ValueError):
    pass


class CategoryInUse(ValueError):
    pass


class DuplicateUser(ValueError):
    pass
