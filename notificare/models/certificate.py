from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict


class Certificate(BaseModel):
    """Reference to the credentials a sender uses to open its APNs channel.

    The file is never opened or parsed here; a message only carries the
    reference so the transport can pick the matching connection.
    """

    model_config = ConfigDict(frozen=True)

    pem_file: str
    passphrase: Optional[str] = None
    environment: Literal["SANDBOX", "PRODUCTION"] = "SANDBOX"
    description: Optional[str] = None
