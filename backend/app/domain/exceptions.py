"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str, field: str = "id"):
        self.entity_type = entity_type
        self.entity_id = entity_id
        self.field = field
        super().__init__(f"{entity_type} with {field} '{entity_id}' not found")


class DuplicateEntityError(Exception):
    """Raised when attempting to create a duplicate entity."""

    def __init__(self, entity_type: str, field: str, value: str):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type} with {field}='{value}' already exists")


class DuplicateSlugError(DuplicateEntityError):
    """Raised when a create or update would reuse another article's slug."""

    def __init__(self, slug: str):
        super().__init__("Article", "slug", slug)
        self.slug = slug


class ValidationError(Exception):
    """Raised when a write request is missing a required value or is malformed."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


class HasChildrenError(Exception):
    """Raised when deleting an article that still has child articles."""

    def __init__(self, article_id: str, child_count: int):
        self.article_id = article_id
        self.child_count = child_count
        super().__init__(
            f"Cannot delete article '{article_id}' with {child_count} child article(s). "
            "Delete or move the child articles first."
        )


class DanglingParentError(Exception):
    """Raised when a write points parent_id at an article that does not exist."""

    def __init__(self, parent_id: str):
        self.parent_id = parent_id
        super().__init__(f"Parent article '{parent_id}' does not exist")


class InvalidParentError(Exception):
    """Raised when reparenting would make an article its own ancestor."""

    def __init__(self, article_id: str, parent_id: str):
        self.article_id = article_id
        self.parent_id = parent_id
        super().__init__(
            f"Article '{parent_id}' cannot be the parent of '{article_id}': "
            "an article cannot be moved under itself or one of its descendants"
        )
