from pydantic import BaseModel


class Link(BaseModel):
    """Hypermedia link attached to resource responses"""

    rel: str
    href: str
    method: str = "GET"
