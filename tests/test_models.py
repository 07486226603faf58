from medium_sdk import (
    AccessToken,
    ContentFormat,
    CreatePostOptions,
    License,
    Post,
    PublishStatus,
    User,
)


def test_unset_post_fields_are_omitted():
    """Test that zero-valued fields never reach the payload."""
    options = CreatePostOptions(user_id="42", title="Title")

    assert options.to_payload() == {"title": "Title"}


def test_routing_fields_are_not_serialized():
    options = CreatePostOptions(
        user_id="42",
        publication_id="b45573563f5a",
        title="Title",
        content="Yo",
        content_format=ContentFormat.HTML
    )

    payload = options.to_payload()

    assert "userId" not in payload
    assert "publicationId" not in payload
    assert list(payload) == ["title", "content", "contentFormat"]


def test_enum_values_are_serialized():
    options = CreatePostOptions(
        title="Title",
        publish_status=PublishStatus.UNLISTED,
        license=License.PUBLIC_DOMAIN,
        tags=["python"]
    )

    assert options.to_payload() == {
        "title": "Title",
        "tags": ["python"],
        "publishStatus": "unlisted",
        "license": "public-domain"
    }


def test_options_accept_api_field_names():
    options = CreatePostOptions.model_validate({
        "title": "Title",
        "contentFormat": "markdown",
        "canonicalUrl": "http://example.com/post"
    })

    assert options.content_format == ContentFormat.MARKDOWN
    assert options.canonical_url == "http://example.com/post"


def test_user_ignores_unknown_fields():
    user = User.model_validate({"id": "1", "username": "someone", "extra": "ignored"})

    assert user.id == "1"
    assert user.image_url is None


def test_post_defaults():
    post = Post.model_validate({"id": "e6f36a"})

    assert post.tags == []
    assert post.publish_status is None
    assert post.license is None


def test_access_token_defaults():
    token = AccessToken.model_validate({"access_token": "abc"})

    assert token.token_type == "Bearer"
    assert token.refresh_token is None
    assert token.scope == []
