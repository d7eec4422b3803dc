"""
Pydantic models for user profiles.

A profile belongs to one identity‑provider account (``userKeycloakId``,
treated as an opaque string) and has a unique public ``userName``.
Categorical fields are enums that all reserve an ``unknown`` member,
used as the default on creation.

Updates must echo the ``rowVersion`` the client last read; see
``services/versioning.py`` for the rules.
"""

from datetime import datetime
from enum import Enum
from typing import Annotated, Optional

from pydantic import Field, StringConstraints

from .common import CamelModel, IdStr


class Gender(str, Enum):
    male = "male"
    female = "female"
    unknown = "unknown"


class Region(str, Enum):
    north_america = "north_america"
    south_america = "south_america"
    europe = "europe"
    asia = "asia"
    oceania = "oceania"
    middle_east = "middle_east"
    africa = "africa"
    russia_cis = "russia_cis"
    unknown = "unknown"


class GameGenre(str, Enum):
    action = "action"
    adventure = "adventure"
    battle_royale = "battle_royale"
    fighting = "fighting"
    fps = "fps"
    mmorpg = "mmorpg"
    moba = "moba"
    platformer = "platformer"
    puzzle = "puzzle"
    racing = "racing"
    rpg = "rpg"
    rts = "rts"
    simulation = "simulation"
    sports = "sports"
    strategy = "strategy"
    survival = "survival"
    unknown = "unknown"


class PlayerType(str, Enum):
    casual = "casual"
    competitive = "competitive"
    professional = "professional"
    content_creator = "content_creator"
    coach = "coach"
    unknown = "unknown"


class IndustryRole(str, Enum):
    player = "player"
    developer = "developer"
    publisher = "publisher"
    esports_org = "esports_org"
    tournament_organizer = "tournament_organizer"
    content_creator = "content_creator"
    journalist = "journalist"
    analyst = "analyst"
    coach = "coach"
    manager = "manager"
    unknown = "unknown"


class LookingFor(str, Enum):
    teammates = "teammates"
    friends = "friends"
    guild = "guild"
    coach = "coach"
    students = "students"
    scrims = "scrims"
    tournaments = "tournaments"
    casual_play = "casual_play"
    unknown = "unknown"


class PresenceStatus(str, Enum):
    online = "online"
    offline = "offline"
    away = "away"
    do_not_disturb = "do_not_disturb"
    invisible = "invisible"
    unknown = "unknown"


KeycloakId = Annotated[str, StringConstraints(min_length=1, max_length=100)]
UserName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=50)]
PersonName = Annotated[str, StringConstraints(strip_whitespace=True, max_length=60)]
ImageUrl = Annotated[str, StringConstraints(max_length=255)]
Bio = Annotated[str, StringConstraints(max_length=500)]


class UserProfileCreate(CamelModel):
    """Schema for creating a profile.  Enum fields default to ``unknown``."""

    user_keycloak_id: KeycloakId
    user_name: UserName
    first_name: Optional[PersonName] = None
    last_name: Optional[PersonName] = None
    profile_image_url: Optional[ImageUrl] = None
    banner_image_url: Optional[ImageUrl] = None
    bio: Optional[Bio] = None
    birth_date: Optional[datetime] = None
    gender: Gender = Gender.unknown
    region: Region = Region.unknown
    favorite_game_genre: GameGenre = GameGenre.unknown
    player_type: PlayerType = PlayerType.unknown
    industry_role: IndustryRole = IndustryRole.unknown
    looking_for: LookingFor = LookingFor.unknown
    presence_status: PresenceStatus = PresenceStatus.unknown


class UserProfileUpdate(CamelModel):
    """Schema for a partial profile update.

    Every profile field is optional, but ``rowVersion`` is required and
    must equal the stored version for the update to be applied.
    """

    user_keycloak_id: Optional[KeycloakId] = None
    user_name: Optional[UserName] = None
    first_name: Optional[PersonName] = None
    last_name: Optional[PersonName] = None
    profile_image_url: Optional[ImageUrl] = None
    banner_image_url: Optional[ImageUrl] = None
    bio: Optional[Bio] = None
    birth_date: Optional[datetime] = None
    gender: Optional[Gender] = None
    region: Optional[Region] = None
    favorite_game_genre: Optional[GameGenre] = None
    player_type: Optional[PlayerType] = None
    industry_role: Optional[IndustryRole] = None
    looking_for: Optional[LookingFor] = None
    presence_status: Optional[PresenceStatus] = None

    row_version: str = Field(..., examples=["0"])


class UserProfileRead(CamelModel):
    id: IdStr
    user_keycloak_id: str
    user_name: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None
    banner_image_url: Optional[str] = None
    bio: Optional[str] = None
    birth_date: Optional[str] = None
    gender: Gender
    region: Region
    favorite_game_genre: GameGenre
    player_type: PlayerType
    industry_role: IndustryRole
    looking_for: LookingFor
    presence_status: PresenceStatus
    last_online: str
    created_at: str
    updated_at: Optional[str] = None
    deleted_at: Optional[str] = None
    row_version: str


class UserProfileEnvelope(CamelModel):
    """Response wrapper used by the create, update and delete endpoints."""

    success: bool = True
    message: str
    data: UserProfileRead
