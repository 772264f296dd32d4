from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class BackupInfo(BaseModel):
    # id is the timestamp part of the file name
    id: str
    name: str
    created_at: Optional[datetime] = None
    size: int = 0
