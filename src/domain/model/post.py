from dataclasses import dataclass


@dataclass(frozen=True)
class PostRecord:
    """Generated post as listed on the posts page. Never mutated here."""
    id: str
    title: str
    content: str
    is_public: bool
    created_at: str
    updated_at: str
    style: str = ''
    author: str = ''
    provider_id: str = ''
    uuid: str = ''
    public_id: str = ''
    version: int = 0
