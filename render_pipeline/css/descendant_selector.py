"""CSS Descendant Selector"""


class DescendantSelector:
    """조상 셀렉터와 자손 셀렉터를 공백으로 결합한 셀렉터

    우선순위는 두 셀렉터 우선순위의 합
    """

    def __init__(self, ancestor, descendant):
        self.ancestor = ancestor
        self.descendant = descendant
        self.priority = ancestor.priority + descendant.priority

    def matches(self, node):
        if not self.descendant.matches(node):
            return False
        while node.parent:
            if self.ancestor.matches(node.parent):
                return True
            node = node.parent
        return False

    def __repr__(self) -> str:
        return (f"DescendantSelector(ancestor={self.ancestor!r}, "
                f"descendant={self.descendant!r}, priority={self.priority})")
