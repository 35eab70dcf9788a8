# -*- coding: utf-8 -*-
# pylint: disable=no-self-argument
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .exception import UnhashableElementError


class SetConfig(BaseModel):
    """Per-set settings, shared by a set and the sets derived from it."""

    model_config = ConfigDict(frozen=True)

    element_type: Optional[type] = Field(
        None,
        description="If set, only instances of this type may be inserted. "
        "'bool' values are never accepted as 'int'.",
    )
    sorted_listing: bool = Field(
        True,
        description="Whether list() sorts members of naturally ordered kinds "
        "(integers, reals, strings).",
    )

    @model_validator(mode="after")
    def check_settings(self):
        if (
            self.element_type is not None
            and self.element_type.__hash__ is None
        ):
            raise UnhashableElementError(
                self.element_type,
                message=f"element_type '{self.element_type.__name__}' is not "
                f"hashable and cannot be stored in a set",
            )
        return self


DEFAULT_CONFIG = SetConfig()
