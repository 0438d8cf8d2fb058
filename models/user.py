"""
Data classes for user records exchanged with the remote users API.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class UserData:
    """A single user record as listed by the API."""
    
    id: int
    """Unique identifier of the user."""
    
    email: str = ""
    """Email address of the user."""
    
    first_name: str = ""
    last_name: str = ""
    
    avatar: str = ""
    """URL of the user's avatar image."""
    
    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UserData":
        return cls(
            id=int(data["id"]),
            email=data.get("email") or "",
            first_name=data.get("first_name") or "",
            last_name=data.get("last_name") or "",
            avatar=data.get("avatar") or "",
        )
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "email": self.email,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "avatar": self.avatar,
        }


@dataclass
class UserList:
    """One page of users plus the totals reported by the server."""
    
    page: int = 1
    """Current page number (1-indexed)."""
    
    per_page: int = 0
    """Number of users per page."""
    
    total: int = 0
    """Total number of users across all pages."""
    
    total_pages: int = 0
    """Total number of pages reported by the server."""
    
    data: List[UserData] = field(default_factory=list)
    
    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "UserList":
        return cls(
            page=int(payload.get("page") or 1),
            per_page=int(payload.get("per_page") or 0),
            total=int(payload.get("total") or 0),
            total_pages=int(payload.get("total_pages") or 0),
            data=[UserData.from_dict(item) for item in payload.get("data") or []],
        )
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "page": self.page,
            "per_page": self.per_page,
            "total": self.total,
            "total_pages": self.total_pages,
            "data": [user.to_dict() for user in self.data],
        }


@dataclass
class UserSupport:
    """Support information returned alongside a single user."""
    
    url: str = ""
    text: str = ""
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UserSupport":
        data = data or {}
        return cls(url=data.get("url") or "", text=data.get("text") or "")


@dataclass
class User:
    """Payload for creating or updating a user."""
    
    name: str = ""
    job: str = ""
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "User":
        return cls(name=data.get("name") or "", job=data.get("job") or "")
    
    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "job": self.job}
