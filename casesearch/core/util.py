""""""


def fqcn(cls: type) -> str:
    """Fully Qualified Class Name."""
    return str(cls.__module__ + "." + cls.__name__)
