from typing import Optional

from pydantic import BaseModel, Field


class AWSConfig(BaseModel):
    access_key_id: Optional[str] = Field(default=None, description="AWS Access Key ID")
    secret_access_key: Optional[str] = Field(default=None, description="AWS Secret Access Key")
    region_name: str = Field(default="us-west-2", description="AWS Region")
