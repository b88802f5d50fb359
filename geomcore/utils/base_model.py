# geomcore/utils/base_model.py
from typing import TypeVar, Any, cast
from pydantic import BaseModel

T = TypeVar('T', bound=BaseModel)


class ImmutableModel(BaseModel):
    """
    Base class for frozen geometric values.

    - Immutability: All instances are frozen after creation
    - Copyability: Modified copies are created via with_changes()
    """
    model_config = {
        "frozen": True,
    }

    def with_changes(self, **changes: Any) -> T:
        """
        Create a new instance with specified changes.

        Args:
            **changes: Keyword arguments with field values to change

        Returns:
            New instance with updated values

        Raises:
            ValueError: If an invalid field name is provided
        """
        current_data = self.model_dump()

        for key, value in changes.items():
            if key not in current_data:
                raise ValueError(f"Invalid field: {key}")
            current_data[key] = value

        cls = self.__class__

        # Revalidate so field validators run against the changed data
        return cast(T, cls.model_validate(current_data))


class ValueModel(BaseModel):
    """
    Base class for mutable geometric values.

    Instances behave as values rather than entities:
    - Assignments are validated the same way construction is
    - copy() returns a fully independent instance
    """
    model_config = {
        "validate_assignment": True,
    }

    def copy(self: T) -> T:
        """Return a deep, independent copy of this value."""
        return self.model_copy(deep=True)
