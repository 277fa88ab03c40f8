"""
Attribute-to-statement mapping for the seven dump entity kinds.

Each kind has a mapper holding a field table: which attribute feeds which
predicate, whether it is required, and whether its value is a literal or
a reference to another entity. Mapping one record is a pure function of
its attributes; no state is kept between records.
"""
import string
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple, Union

from rdflib import BNode, Literal, URIRef

from . import identifiers
from .errors import MissingAttributeError
from .reader import collect_attributes

Statement = Tuple[BNode, URIRef, Union[Literal, BNode]]


# ----------------------------------------------------------------------
# Entity kinds
# ----------------------------------------------------------------------
class EntityKind(Enum):
    BADGE = "Badges"
    COMMENT = "Comments"
    POST = "Posts"
    POST_HISTORY = "PostHistory"
    POST_LINK = "PostLinks"
    TAG = "Tags"
    USER = "Users"


# ----------------------------------------------------------------------
# Field table entries
# ----------------------------------------------------------------------
LITERAL = "literal"
LOWERCASE = "lowercase"
REFERENCE = "reference"
TAG_LIST = "tag_list"

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


class Field:
    """One attribute of a record and the predicate it is written under."""

    def __init__(self, attribute: str, predicate: str, required: bool = True,
                 value_type: str = LITERAL, target: Optional[str] = None):
        if value_type == REFERENCE and target is None:
            raise ValueError(f"reference field `{attribute}` needs a target prefix")
        self.attribute = attribute
        self.predicate = URIRef(predicate)
        self.required = required
        self.value_type = value_type
        self.target = target

    def objects(self, value: str) -> List[Union[Literal, BNode]]:
        """Statement objects for a present attribute value."""
        if self.value_type == REFERENCE:
            return [BNode(identifiers.derive(self.target, value))]
        if self.value_type == TAG_LIST:
            return [BNode(identifiers.derive_tag(name)) for name in split_tags(value)]
        if self.value_type == LOWERCASE:
            return [Literal(value.translate(_ASCII_LOWER))]
        return [Literal(value)]

    def __repr__(self):
        return f"Field({self.attribute!r} -> {str(self.predicate)!r})"


def optional(attribute: str, predicate: str, **kwargs) -> Field:
    return Field(attribute, predicate, required=False, **kwargs)


def ref(attribute: str, predicate: str, target: str, required: bool = True) -> Field:
    return Field(attribute, predicate, required=required, value_type=REFERENCE, target=target)


def split_tags(value: str) -> List[str]:
    """`<a><b-c>` -> ['a', 'b-c']; an empty list yields no names."""
    inner = value[1:-1]
    if not inner:
        return []
    return inner.split("><")


# ----------------------------------------------------------------------
# Mappers
# ----------------------------------------------------------------------
class EntityMapper:
    """Maps the attributes of one record of a kind to its statements."""

    kind: EntityKind = None
    prefix: str = None
    key: str = "Id"
    fields: Tuple[Field, ...] = ()

    def attribute_names(self) -> Tuple[str, ...]:
        names = [self.key]
        names.extend(f.attribute for f in self.fields if f.attribute != self.key)
        return tuple(names)

    def subject(self, key: str) -> str:
        return identifiers.derive(self.prefix, key)

    def check_required(self, attrs: Dict[str, Optional[str]]):
        """Raise MissingAttributeError for the first required attribute that is absent."""
        key = attrs.get(self.key)
        if key is None:
            raise MissingAttributeError(self.kind.value, self.key)
        for field in self.fields:
            if field.required and attrs.get(field.attribute) is None:
                raise MissingAttributeError(self.kind.value, field.attribute, key)

    def map(self, attrs: Dict[str, Optional[str]]) -> List[Statement]:
        """Statements for one record, in field table order."""
        self.check_required(attrs)
        subject = BNode(self.subject(attrs[self.key]))
        statements = []
        for field in self.fields:
            value = attrs.get(field.attribute)
            if value is None:
                continue
            for obj in field.objects(value):
                statements.append((subject, field.predicate, obj))
        return statements

    def map_row(self, pairs: Iterable[Tuple[str, str]]) -> List[Statement]:
        """Collect the recognized attributes of a raw record and map them."""
        return self.map(collect_attributes(pairs, self.attribute_names()))


class BadgeMapper(EntityMapper):
    kind = EntityKind.BADGE
    prefix = identifiers.BADGE
    fields = (
        ref("UserId", "badge.user", identifiers.USER),
        Field("Name", "badge.name"),
        Field("Date", "badge.date"),
        Field("Class", "badge.class"),
        # Boolean as text; lower-cased, not validated
        Field("TagBased", "badge.tag_based", value_type=LOWERCASE),
    )


class CommentMapper(EntityMapper):
    kind = EntityKind.COMMENT
    prefix = identifiers.COMMENT
    fields = (
        ref("PostId", "comment.post", identifiers.POST),
        Field("Score", "comment.score"),
        Field("Text", "comment.text"),
        Field("CreationDate", "comment.creation_date"),
        ref("UserId", "comment.user", identifiers.USER, required=False),
        optional("UserDisplayName", "comment.user_display_name"),
        Field("ContentLicense", "comment.content_license"),
    )


class PostMapper(EntityMapper):
    kind = EntityKind.POST
    prefix = identifiers.POST
    fields = (
        Field("PostTypeId", "post.type"),
        ref("AcceptedAnswerId", "post.accepted_answer", identifiers.POST, required=False),
        ref("ParentId", "post.parent", identifiers.POST, required=False),
        Field("CreationDate", "post.creation_date"),
        optional("DeletionDate", "post.deletion_date"),
        Field("Score", "post.score"),
        optional("ViewCount", "post.view_count"),
        Field("Body", "post.body"),
        ref("OwnerUserId", "post.owner", identifiers.USER, required=False),
        optional("OwnerDisplayName", "post.owner_display_name"),
        ref("LastEditorUserId", "post.last_editor", identifiers.USER, required=False),
        optional("LastEditorDisplayName", "post.last_editor_display_name"),
        optional("LastEditDate", "post.last_edit_date"),
        optional("LastActivityDate", "post.last_activity_date"),
        optional("Title", "post.title"),
        optional("Tags", "post.tags", value_type=TAG_LIST),
        optional("AnswerCount", "post.answer_count"),
        optional("CommentCount", "post.comment_count"),
        optional("FavoriteCount", "post.favorite_count"),
        optional("ClosedDate", "post.closed_date"),
        optional("CommunityOwnedDate", "post.community_owned_date"),
        Field("ContentLicense", "post.content_license"),
    )


class PostHistoryMapper(EntityMapper):
    kind = EntityKind.POST_HISTORY
    prefix = identifiers.POST_HISTORY
    fields = (
        Field("PostHistoryTypeId", "posthistory.type"),
        ref("PostId", "posthistory.post", identifiers.POST),
        Field("RevisionGUID", "posthistory.revision_guid"),
        Field("CreationDate", "posthistory.creation_date"),
        ref("UserId", "posthistory.user", identifiers.USER, required=False),
        optional("UserDisplayName", "posthistory.user_display_name"),
        optional("Comment", "posthistory.comment"),
        optional("Text", "posthistory.text"),
        optional("ContentLicense", "posthistory.content_license"),
    )


class PostLinkMapper(EntityMapper):
    kind = EntityKind.POST_LINK
    prefix = identifiers.POST_LINK
    fields = (
        Field("CreationDate", "postlink.creation_date"),
        ref("PostId", "postlink.post", identifiers.POST),
        ref("RelatedPostId", "postlink.related_post", identifiers.POST),
        Field("LinkTypeId", "postlink.link_type"),
    )


class TagMapper(EntityMapper):
    kind = EntityKind.TAG
    prefix = identifiers.TAG
    key = "TagName"
    fields = (
        Field("TagName", "tag.name"),
        Field("Count", "tag.count"),
        ref("WikiPostId", "tag.wiki_post", identifiers.POST, required=False),
    )

    def subject(self, key: str) -> str:
        # Tags have no numeric id, the name is the key
        return identifiers.derive_tag(key)


class UserMapper(EntityMapper):
    kind = EntityKind.USER
    prefix = identifiers.USER
    fields = (
        Field("Reputation", "user.reputation"),
        Field("CreationDate", "user.creation_date"),
        Field("DisplayName", "user.display_name"),
        Field("LastAccessDate", "user.last_access_date"),
        optional("WebsiteUrl", "user.website_url"),
        optional("Location", "user.location"),
        optional("AboutMe", "user.about_me"),
        Field("Views", "user.views"),
        Field("UpVotes", "user.upvotes"),
        Field("DownVotes", "user.downvotes"),
        optional("ProfileImageUrl", "user.profile_image_url"),
        optional("AccountId", "user.account_id"),
    )


MAPPERS: Dict[EntityKind, EntityMapper] = {
    EntityKind.BADGE: BadgeMapper(),
    EntityKind.COMMENT: CommentMapper(),
    EntityKind.POST: PostMapper(),
    EntityKind.POST_HISTORY: PostHistoryMapper(),
    EntityKind.POST_LINK: PostLinkMapper(),
    EntityKind.TAG: TagMapper(),
    EntityKind.USER: UserMapper(),
}


def get_mapper(kind: EntityKind) -> EntityMapper:
    return MAPPERS[kind]


def map_record(kind: EntityKind, pairs: Iterable[Tuple[str, str]]) -> List[Statement]:
    """Statements for one raw record of the given kind."""
    return MAPPERS[kind].map_row(pairs)
