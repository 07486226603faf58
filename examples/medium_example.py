"""
Example of the Medium OAuth flow and post creation.
"""

import asyncio
import os
from dotenv import load_dotenv
from medium_sdk import (
    ContentFormat,
    CreatePostOptions,
    MediumClient,
    PublishStatus,
    Scope,
    UploadOptions,
)

async def main():
    # Load environment variables
    load_dotenv()

    client = MediumClient(
        client_id=os.getenv("MEDIUM_CLIENT_ID", ""),
        client_secret=os.getenv("MEDIUM_CLIENT_SECRET", "")
    )
    redirect_url = os.getenv("MEDIUM_CALLBACK_URL", "")

    auth_url = client.get_authorization_url(
        "example-state",
        redirect_url,
        [Scope.BASIC_PROFILE, Scope.PUBLISH_POST, Scope.UPLOAD_IMAGE]
    )
    print("\nAuthorization URL:")
    print(auth_url)

    # In a real app, user would be redirected to this URL
    # For this example, manually input the code
    code = input("\nEnter the authorization code: ")

    try:
        token = await client.exchange_authorization_code(code, redirect_url)
        print("\nToken expires at:", token.expires_at)

        user = await client.get_user()
        print("\nAuthenticated as:", user.username)

        image_path = os.getenv("MEDIUM_EXAMPLE_IMAGE")
        content = "<h1>Hello from medium_sdk</h1>"
        if image_path:
            image = await client.upload_image(UploadOptions(file_path=image_path, content_type="image/png"))
            content += f'<img src="{image.url}">'

        post = await client.create_post(CreatePostOptions(
            user_id=user.id,
            title="Hello from medium_sdk",
            content=content,
            content_format=ContentFormat.HTML,
            publish_status=PublishStatus.DRAFT
        ))
        print("\nDraft created:", post.url)

    except Exception as e:
        print(f"Error: {str(e)}")

if __name__ == "__main__":
    asyncio.run(main())
