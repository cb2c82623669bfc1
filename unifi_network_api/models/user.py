from dataclasses import dataclass
from typing import ClassVar, Optional

from .base import UnifiResource


@dataclass
class UnifiUser(UnifiResource):
    """
    Represents a known client (user) record.

    Unlike active-station data, these records persist after a client
    disconnects and carry the operator's settings for it: alias, note,
    fixed IP reservation, user group and block state. The record is keyed by
    ``mac``; deleting it "forgets" the client.
    """

    endpoint: ClassVar[str] = "user"

    site_id: Optional[str] = None
    mac: Optional[str] = None
    name: Optional[str] = None
    note: Optional[str] = None
    noted: Optional[bool] = None
    use_fixedip: Optional[bool] = None
    fixed_ip: Optional[str] = None
    network_id: Optional[str] = None
    usergroup_id: Optional[str] = None
    blocked: Optional[bool] = None
    is_wired: Optional[bool] = None
    is_guest: Optional[bool] = None
    oui: Optional[str] = None
    first_seen: Optional[int] = None
    last_seen: Optional[int] = None
