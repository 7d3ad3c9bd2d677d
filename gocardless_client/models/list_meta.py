from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeVar, Union

from attrs import define as _attrs_define
from attrs import field as _attrs_field

from ..types import UNSET, Unset

if TYPE_CHECKING:
    from ..models.list_meta_cursors import ListMetaCursors


T = TypeVar("T", bound="ListMeta")


@_attrs_define
class ListMeta:
    """Pagination details of a cursor-paginated list

    Attributes:
        cursors (Union[Unset, ListMetaCursors]): Cursors for fetching the neighbouring pages of a list
        limit (Union[Unset, int]): Upper bound for the number of objects in the page.
    """

    cursors: Union[Unset, "ListMetaCursors"] = UNSET
    limit: Union[Unset, int] = UNSET
    additional_properties: dict[str, Any] = _attrs_field(init=False, factory=dict)

    def to_dict(self) -> dict[str, Any]:
        cursors: Union[Unset, dict[str, Any]] = UNSET
        if not isinstance(self.cursors, Unset):
            cursors = self.cursors.to_dict()

        limit = self.limit

        field_dict: dict[str, Any] = {}
        field_dict.update(self.additional_properties)
        field_dict.update({})
        if cursors is not UNSET:
            field_dict["cursors"] = cursors
        if limit is not UNSET:
            field_dict["limit"] = limit

        return field_dict

    @classmethod
    def from_dict(cls: type[T], src_dict: Mapping[str, Any]) -> T:
        from ..models.list_meta_cursors import ListMetaCursors

        d = dict(src_dict)
        _cursors = d.pop("cursors", UNSET)
        cursors: Union[Unset, ListMetaCursors]
        if isinstance(_cursors, Unset):
            cursors = UNSET
        else:
            cursors = ListMetaCursors.from_dict(_cursors)

        limit = d.pop("limit", UNSET)

        list_meta = cls(
            cursors=cursors,
            limit=limit,
        )

        list_meta.additional_properties = d
        return list_meta

    @property
    def additional_keys(self) -> list[str]:
        return list(self.additional_properties.keys())

    def __getitem__(self, key: str) -> Any:
        return self.additional_properties[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self.additional_properties[key] = value

    def __delitem__(self, key: str) -> None:
        del self.additional_properties[key]

    def __contains__(self, key: str) -> bool:
        return key in self.additional_properties
