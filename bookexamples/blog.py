"""Blog posts moving through draft, review and publication."""

from enum import Enum, auto


class _State(Enum):
    DRAFT = auto()
    PENDING = auto()
    PENDING_APPROVED_ONCE = auto()
    PUBLISHED = auto()


_APPROVE = {
    _State.DRAFT: _State.DRAFT,
    _State.PENDING: _State.PENDING_APPROVED_ONCE,
    _State.PENDING_APPROVED_ONCE: _State.PUBLISHED,
    _State.PUBLISHED: _State.PUBLISHED,
}
_REJECT = {
    _State.DRAFT: _State.DRAFT,
    _State.PENDING: _State.DRAFT,
    _State.PENDING_APPROVED_ONCE: _State.DRAFT,
    _State.PUBLISHED: _State.PUBLISHED,
}
_REQUEST_REVIEW = {
    _State.DRAFT: _State.PENDING,
    _State.PENDING: _State.PENDING,
    _State.PENDING_APPROVED_ONCE: _State.PENDING_APPROVED_ONCE,
    _State.PUBLISHED: _State.PUBLISHED,
}


class Post:
    """A post whose state changes in place; it needs two approvals to publish."""

    def __init__(self):
        self._content = ""
        self._state = _State.DRAFT

    def add_text(self, text):
        """Append text; ignored unless the post is a draft."""
        if self._state is _State.DRAFT:
            self._content += text

    def request_review(self):
        self._state = _REQUEST_REVIEW[self._state]

    def approve(self):
        self._state = _APPROVE[self._state]

    def reject(self):
        self._state = _REJECT[self._state]

    def content(self):
        """The text once published, an empty string before."""
        return self._content if self._state is _State.PUBLISHED else ""


class DraftPost:
    """A post being written; only drafts accept text."""

    def __init__(self, content=""):
        self._content = content

    def add_text(self, text):
        self._content += text

    def request_review(self):
        return PendingReviewPost(self._content)


class PendingReviewPost:
    """A post awaiting its approvals."""

    def __init__(self, content, approved=False):
        self._content = content
        self._approved = approved

    def approve(self):
        """The published post on the second approval, else a post still pending."""
        if self._approved:
            return PublishedPost(self._content)
        return PendingReviewPost(self._content, approved=True)

    def reject(self):
        return DraftPost(self._content)


class PublishedPost:
    """A post that can be read."""

    def __init__(self, content):
        self._content = content

    def content(self):
        return self._content