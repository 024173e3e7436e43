"""
Multipart upload handling for FastAPI routes.

``UploadMiddleware`` mirrors the familiar single/array/fields surface:
each method returns an async dependency that parses the multipart form,
checks the declared fields and limits, and stores every file through
StoreUploadUseCase.

Usage:
    uploads = UploadMiddleware(use_case)

    @router.post("/profile/avatar")
    async def set_avatar(avatar: StoredFile | None = Depends(uploads.single("avatar"))):
        ...
"""

import logging
from typing import Awaitable, Callable, Iterable, Mapping, Optional, Sequence, Union

from starlette.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile
from starlette.requests import Request

from forexdesk.application.uploads.store_upload import StoreUploadUseCase
from forexdesk.domain.errors import UnexpectedFileFieldError, UploadLimitExceededError
from forexdesk.domain.uploads.entities import FieldSpec, IncomingFile, StoredFile

logger = logging.getLogger(__name__)

FieldSpecLike = Union[FieldSpec, Mapping[str, object], str]


def _as_field_spec(spec: FieldSpecLike) -> FieldSpec:
    if isinstance(spec, FieldSpec):
        return spec
    if isinstance(spec, str):
        return FieldSpec(name=spec)
    max_count = spec.get("max_count", spec.get("maxCount"))
    return FieldSpec(name=str(spec["name"]), max_count=max_count)


class UploadMiddleware:
    """Factory of FastAPI dependencies that receive and store uploads.

    Args:
        use_case: Use case that validates, names and stores each file.
    """

    def __init__(self, use_case: StoreUploadUseCase) -> None:
        self._use_case = use_case

    def single(self, field_name: str) -> Callable[[Request], Awaitable[Optional[StoredFile]]]:
        """Accept at most one file on ``field_name``."""
        collect = self._collector({field_name: 1})

        async def dependency(request: Request) -> Optional[StoredFile]:
            stored = await collect(request)
            files = stored.get(field_name, [])
            return files[0] if files else None

        return dependency

    def array(
        self, field_name: str, max_count: Optional[int] = None
    ) -> Callable[[Request], Awaitable[list[StoredFile]]]:
        """Accept any number of files (up to ``max_count``) on ``field_name``."""
        collect = self._collector({field_name: max_count})

        async def dependency(request: Request) -> list[StoredFile]:
            stored = await collect(request)
            return stored.get(field_name, [])

        return dependency

    def fields(
        self, specs: Sequence[FieldSpecLike]
    ) -> Callable[[Request], Awaitable[dict[str, list[StoredFile]]]]:
        """Accept files on several named fields, each with its own limit."""
        limits = {spec.name: spec.max_count for spec in map(_as_field_spec, specs)}
        return self._collector(limits)

    def _collector(
        self, limits: Mapping[str, Optional[int]]
    ) -> Callable[[Request], Awaitable[dict[str, list[StoredFile]]]]:
        async def collect(request: Request) -> dict[str, list[StoredFile]]:
            form = await request.form()
            incoming = await self._read_files(form.multi_items(), limits)
            stored: dict[str, list[StoredFile]] = {name: [] for name in limits}
            for file in incoming:
                # the SDK call blocks; keep it off the event loop
                result = await run_in_threadpool(self._use_case.execute, file)
                stored[file.field_name].append(result)
            return stored

        return collect

    async def _read_files(
        self,
        items: Iterable[tuple[str, object]],
        limits: Mapping[str, Optional[int]],
    ) -> list[IncomingFile]:
        files: list[IncomingFile] = []
        counts: dict[str, int] = {}
        for field_name, value in items:
            if not isinstance(value, UploadFile):
                continue
            if field_name not in limits:
                raise UnexpectedFileFieldError(field_name)

            counts[field_name] = counts.get(field_name, 0) + 1
            max_count = limits[field_name]
            if max_count is not None and counts[field_name] > max_count:
                raise UploadLimitExceededError(field_name, max_count)

            incoming = IncomingFile(
                field_name=field_name,
                original_name=value.filename or "",
                content_type=value.content_type,
                data=await value.read(),
            )
            # check every file before any is sent to storage
            self._use_case.check_format(incoming)
            files.append(incoming)

        logger.debug("Received %d upload(s)", len(files))
        return files
