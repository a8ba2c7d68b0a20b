"""Pydantic schemas for circuit records."""
from pydantic import BaseModel


class CircuitCreate(BaseModel):
    """Creation payload; every attribute is optional and defaults to ''."""

    state: str | None = None
    site_name: str | None = None
    ckt_id: str | None = None
    parent: str | None = None
    link_type: str | None = None
    provider: str | None = None
    z_loc: str | None = None
    rtr_name_z_loc: str | None = None
    to_description: str | None = None
    rtr_port_z_loc: str | None = None
    interf_ip_z_loc: str | None = None
    a_loc: str | None = None
    rtr_name_a_loc: str | None = None
    rtr_port: str | None = None
    interf_ip_a_loc: str | None = None
    bw_mbps: str | None = None
    single_isp: str | None = None
    ups_closet: str | None = None
    router_ip: str | None = None

    def to_record(self, circuit_id: str) -> "CircuitRecord":
        values = {k: v or "" for k, v in self.model_dump().items()}
        return CircuitRecord(id=circuit_id, **values)


class CircuitRecord(BaseModel):
    """A full circuit row, as stored, updated, imported and exported."""

    id: str
    state: str = ""
    site_name: str = ""
    ckt_id: str = ""
    parent: str = ""
    link_type: str = ""
    provider: str = ""
    z_loc: str = ""
    rtr_name_z_loc: str = ""
    to_description: str = ""
    rtr_port_z_loc: str = ""
    interf_ip_z_loc: str = ""
    a_loc: str = ""
    rtr_name_a_loc: str = ""
    rtr_port: str = ""
    interf_ip_a_loc: str = ""
    bw_mbps: str = ""
    single_isp: str = ""
    ups_closet: str = ""
    router_ip: str = ""

    model_config = {"from_attributes": True}
