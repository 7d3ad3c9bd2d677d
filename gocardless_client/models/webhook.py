import datetime
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeVar, Union

from attrs import define as _attrs_define
from attrs import field as _attrs_field
from dateutil.parser import isoparse

from ..types import UNSET, Unset

if TYPE_CHECKING:
    from ..models.webhook_request_headers import WebhookRequestHeaders
    from ..models.webhook_response_headers import WebhookResponseHeaders


T = TypeVar("T", bound="Webhook")


@_attrs_define
class Webhook:
    """Basic description of a webhook

    Attributes:
        created_at (Union[Unset, datetime.datetime]): Fixed timestamp, recording when this resource was created.
        id (Union[Unset, str]): Unique identifier, beginning with "WB".
        is_test (Union[Unset, bool]): Whether this was a demo webhook for testing
        request_body (Union[Unset, str]): The body of the request sent to the webhook URL
        request_headers (Union[Unset, WebhookRequestHeaders]): The request headers sent with the webhook
        response_body (Union[Unset, str]): The body of the response from the webhook URL
        response_body_truncated (Union[Unset, bool]): Whether the webhook response body was truncated
        response_code (Union[Unset, int]): The response code from the webhook request
        response_headers (Union[Unset, WebhookResponseHeaders]): The headers sent with the response from the webhook
            URL
        response_headers_content_truncated (Union[Unset, bool]): Whether the content of response headers was truncated
        response_headers_count_truncated (Union[Unset, bool]): Whether the number of response headers was truncated
        successful (Union[Unset, bool]): Whether the request was successful or failed
        url (Union[Unset, str]): URL the webhook was POST-ed to
    """

    created_at: Union[Unset, datetime.datetime] = UNSET
    id: Union[Unset, str] = UNSET
    is_test: Union[Unset, bool] = UNSET
    request_body: Union[Unset, str] = UNSET
    request_headers: Union[Unset, "WebhookRequestHeaders"] = UNSET
    response_body: Union[Unset, str] = UNSET
    response_body_truncated: Union[Unset, bool] = UNSET
    response_code: Union[Unset, int] = UNSET
    response_headers: Union[Unset, "WebhookResponseHeaders"] = UNSET
    response_headers_content_truncated: Union[Unset, bool] = UNSET
    response_headers_count_truncated: Union[Unset, bool] = UNSET
    successful: Union[Unset, bool] = UNSET
    url: Union[Unset, str] = UNSET
    additional_properties: dict[str, Any] = _attrs_field(init=False, factory=dict)

    def to_dict(self) -> dict[str, Any]:
        created_at: Union[Unset, str] = UNSET
        if not isinstance(self.created_at, Unset):
            created_at = self.created_at.isoformat()

        id = self.id

        is_test = self.is_test

        request_body = self.request_body

        request_headers: Union[Unset, dict[str, Any]] = UNSET
        if not isinstance(self.request_headers, Unset):
            request_headers = self.request_headers.to_dict()

        response_body = self.response_body

        response_body_truncated = self.response_body_truncated

        response_code = self.response_code

        response_headers: Union[Unset, dict[str, Any]] = UNSET
        if not isinstance(self.response_headers, Unset):
            response_headers = self.response_headers.to_dict()

        response_headers_content_truncated = self.response_headers_content_truncated

        response_headers_count_truncated = self.response_headers_count_truncated

        successful = self.successful

        url = self.url

        field_dict: dict[str, Any] = {}
        field_dict.update(self.additional_properties)
        field_dict.update({})
        if created_at is not UNSET:
            field_dict["created_at"] = created_at
        if id is not UNSET:
            field_dict["id"] = id
        if is_test is not UNSET:
            field_dict["is_test"] = is_test
        if request_body is not UNSET:
            field_dict["request_body"] = request_body
        if request_headers is not UNSET:
            field_dict["request_headers"] = request_headers
        if response_body is not UNSET:
            field_dict["response_body"] = response_body
        if response_body_truncated is not UNSET:
            field_dict["response_body_truncated"] = response_body_truncated
        if response_code is not UNSET:
            field_dict["response_code"] = response_code
        if response_headers is not UNSET:
            field_dict["response_headers"] = response_headers
        if response_headers_content_truncated is not UNSET:
            field_dict["response_headers_content_truncated"] = response_headers_content_truncated
        if response_headers_count_truncated is not UNSET:
            field_dict["response_headers_count_truncated"] = response_headers_count_truncated
        if successful is not UNSET:
            field_dict["successful"] = successful
        if url is not UNSET:
            field_dict["url"] = url

        return field_dict

    @classmethod
    def from_dict(cls: type[T], src_dict: Mapping[str, Any]) -> T:
        from ..models.webhook_request_headers import WebhookRequestHeaders
        from ..models.webhook_response_headers import WebhookResponseHeaders

        d = dict(src_dict)
        _created_at = d.pop("created_at", UNSET)
        created_at: Union[Unset, datetime.datetime]
        if isinstance(_created_at, Unset):
            created_at = UNSET
        else:
            created_at = isoparse(_created_at)

        id = d.pop("id", UNSET)

        is_test = d.pop("is_test", UNSET)

        request_body = d.pop("request_body", UNSET)

        _request_headers = d.pop("request_headers", UNSET)
        request_headers: Union[Unset, WebhookRequestHeaders]
        if isinstance(_request_headers, Unset):
            request_headers = UNSET
        else:
            request_headers = WebhookRequestHeaders.from_dict(_request_headers)

        response_body = d.pop("response_body", UNSET)

        response_body_truncated = d.pop("response_body_truncated", UNSET)

        response_code = d.pop("response_code", UNSET)

        _response_headers = d.pop("response_headers", UNSET)
        response_headers: Union[Unset, WebhookResponseHeaders]
        if isinstance(_response_headers, Unset):
            response_headers = UNSET
        else:
            response_headers = WebhookResponseHeaders.from_dict(_response_headers)

        response_headers_content_truncated = d.pop("response_headers_content_truncated", UNSET)

        response_headers_count_truncated = d.pop("response_headers_count_truncated", UNSET)

        successful = d.pop("successful", UNSET)

        url = d.pop("url", UNSET)

        webhook = cls(
            created_at=created_at,
            id=id,
            is_test=is_test,
            request_body=request_body,
            request_headers=request_headers,
            response_body=response_body,
            response_body_truncated=response_body_truncated,
            response_code=response_code,
            response_headers=response_headers,
            response_headers_content_truncated=response_headers_content_truncated,
            response_headers_count_truncated=response_headers_count_truncated,
            successful=successful,
            url=url,
        )

        webhook.additional_properties = d
        return webhook

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
