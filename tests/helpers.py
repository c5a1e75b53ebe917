from statusreport.contacts import Contact


def _contact(status, *tags, name="someone", price=None) -> Contact:
    return Contact(name=name, status=status, tags=frozenset(tags), price=price)
