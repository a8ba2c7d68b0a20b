from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from tracker.db.base import Base, ULIDMixin

# Column order of the circuits table; CSV import/export uses the same order.
CIRCUIT_FIELDS = (
    "id",
    "state",
    "site_name",
    "ckt_id",
    "parent",
    "link_type",
    "provider",
    "z_loc",
    "rtr_name_z_loc",
    "to_description",
    "rtr_port_z_loc",
    "interf_ip_z_loc",
    "a_loc",
    "rtr_name_a_loc",
    "rtr_port",
    "interf_ip_a_loc",
    "bw_mbps",
    "single_isp",
    "ups_closet",
    "router_ip",
)


def _text():
    return mapped_column(Text, nullable=False, default="", server_default="")


class Circuit(Base, ULIDMixin):
    """One telecom link. Every attribute is free text."""

    __tablename__ = "circuits"

    state: Mapped[str] = _text()
    site_name: Mapped[str] = _text()
    ckt_id: Mapped[str] = _text()
    parent: Mapped[str] = _text()
    link_type: Mapped[str] = _text()
    provider: Mapped[str] = _text()
    z_loc: Mapped[str] = _text()                # far end
    rtr_name_z_loc: Mapped[str] = _text()
    to_description: Mapped[str] = _text()
    rtr_port_z_loc: Mapped[str] = _text()
    interf_ip_z_loc: Mapped[str] = _text()
    a_loc: Mapped[str] = _text()                # near end
    rtr_name_a_loc: Mapped[str] = _text()
    rtr_port: Mapped[str] = _text()
    interf_ip_a_loc: Mapped[str] = _text()
    bw_mbps: Mapped[str] = _text()
    single_isp: Mapped[str] = _text()
    ups_closet: Mapped[str] = _text()
    router_ip: Mapped[str] = _text()
