from bookexamples.blog import DraftPost, PendingReviewPost, Post, PublishedPost


def _process_pending(post):
    while True:
        post = post.approve()
        if isinstance(post, PublishedPost):
            return post


def test_stateful_post_workflow():
    post = Post()
    post.add_text("I ate a salad for lunch today")
    assert post.content() == ""

    post.request_review()
    assert post.content() == ""

    post.add_text(".")

    post.reject()
    assert post.content() == ""

    post.request_review()
    assert post.content() == ""

    post.approve()
    assert post.content() == ""

    post.approve()
    assert post.content() == "I ate a salad for lunch today"


def test_stateful_post_accepts_text_after_rejection():
    post = Post()
    post.add_text("a")
    post.request_review()
    post.reject()
    post.add_text("b")
    post.request_review()
    post.approve()
    post.approve()
    assert post.content() == "ab"


def test_stateful_draft_cannot_be_approved():
    post = Post()
    post.add_text("hello")
    post.approve()
    post.approve()
    assert post.content() == ""


def test_published_post_ignores_reject():
    post = Post()
    post.add_text("hello")
    post.request_review()
    post.approve()
    post.approve()
    post.reject()
    assert post.content() == "hello"


def test_typed_post_workflow():
    draft = DraftPost()
    draft.add_text("I ate a salad for lunch today")

    pending = draft.request_review()
    pending = pending.approve()
    assert isinstance(pending, PendingReviewPost)

    draft = pending.reject()
    assert isinstance(draft, DraftPost)

    published = _process_pending(draft.request_review())
    assert published.content() == "I ate a salad for lunch today"


def test_typed_post_needs_two_approvals():
    pending = DraftPost("text").request_review()
    first = pending.approve()
    second = first.approve()
    assert isinstance(first, PendingReviewPost)
    assert isinstance(second, PublishedPost)
    assert second.content() == "text"