class EmptyListError(Exception):
    def __init__(self):
        super().__init__(
            "Can't take the tail of an empty list (there is no"
            " head to remove)"
        )
