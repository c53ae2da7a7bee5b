"""Files service."""
from __future__ import annotations

import os
from typing import Union

from ..models.files import File, FileList
from .base import BaseService


class FilesService(BaseService):
    service_name = "files"

    def list(self) -> FileList:
        return self._get("files", FileList)

    def get(self, file_id: str) -> File:
        return self._get(f"files/{file_id}", File)

    def delete(self, file_id: str) -> None:
        self._transport.request("DELETE", f"files/{file_id}")

    def upload(self, path: Union[str, os.PathLike], purpose: str) -> File:
        """Upload a local file as multipart form data (fields ``file`` and ``purpose``)."""
        with open(path, "rb") as fh:
            response = self._transport.request(
                "POST",
                "files",
                files={"file": (os.path.basename(os.fspath(path)), fh)},
                data={"purpose": purpose},
            )
        return File.model_validate(response.json())

    def download(self, file_id: str) -> bytes:
        """Return the raw content of a file."""
        return self._transport.request("GET", f"files/{file_id}/content").content


__all__ = ["FilesService"]
