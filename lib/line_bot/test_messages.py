"""
Tests for message builders.
"""

from .constants import ImageAspectRatio, ImageSize
from .messages import (
    createAudio,
    createButtonsTemplate,
    createButtonTemplate,
    createCarouselTemplate,
    createConfirmTemplate,
    createFlex,
    createImage,
    createImagemap,
    createImageCarouselTemplate,
    createLocation,
    createSticker,
    createText,
    createVideo,
)

QUICK_REPLY = {"items": [{"type": "action", "action": {"type": "location", "label": "Send location"}}]}


class TestSimpleMessages:
    def test_text(self):
        assert createText("Hello") == {"type": "text", "text": "Hello"}

    def test_text_with_quick_reply(self):
        assert createText("Hi", quickReply=QUICK_REPLY) == {"type": "text", "text": "Hi", "quickReply": QUICK_REPLY}

    def test_image_preview(self):
        """Test preview defaults to original, explicit preview is kept, dood!"""
        assert createImage("https://e.com/o.jpg")["previewImageUrl"] == "https://e.com/o.jpg"
        assert createImage("https://e.com/o.jpg", "https://e.com/p.jpg")["previewImageUrl"] == "https://e.com/p.jpg"

    def test_video_and_audio(self):
        assert createVideo("https://e.com/v.mp4", "https://e.com/p.jpg") == {
            "type": "video",
            "originalContentUrl": "https://e.com/v.mp4",
            "previewImageUrl": "https://e.com/p.jpg",
        }
        assert createAudio("https://e.com/a.m4a", 60000) == {
            "type": "audio",
            "originalContentUrl": "https://e.com/a.m4a",
            "duration": 60000,
        }

    def test_location_and_sticker(self):
        assert createLocation("t", "a", 1.5, -2.25)["latitude"] == 1.5
        assert createSticker("446", "1988", quickReply=QUICK_REPLY) == {
            "type": "sticker",
            "packageId": "446",
            "stickerId": "1988",
            "quickReply": QUICK_REPLY,
        }

    def test_imagemap_without_video(self):
        message = createImagemap("alt", "https://e.com/im", {"width": 1040, "height": 585}, [])
        assert "video" not in message
        assert message["type"] == "imagemap"
        assert message["baseSize"] == {"width": 1040, "height": 585}

    def test_flex(self):
        contents = {"type": "bubble", "body": {"type": "box", "layout": "vertical", "contents": []}}
        assert createFlex("alt", contents) == {"type": "flex", "altText": "alt", "contents": contents}


class TestTemplates:
    def test_button_template_minimal(self):
        actions = [{"type": "uri", "label": "Open", "uri": "https://e.com"}]
        assert createButtonTemplate("alt", "text", actions) == {
            "type": "template",
            "altText": "alt",
            "template": {"type": "buttons", "text": "text", "actions": actions},
        }

    def test_button_template_full(self):
        message = createButtonsTemplate(
            "alt",
            "text",
            [],
            thumbnailImageUrl="https://e.com/t.jpg",
            imageAspectRatio=ImageAspectRatio.SQUARE,
            imageSize=ImageSize.COVER,
            imageBackgroundColor="#FFFFFF",
            title="Title",
            defaultAction={"type": "uri", "uri": "https://e.com"},
            quickReply=QUICK_REPLY,
        )
        template = message["template"]
        assert template["imageAspectRatio"] == "square"
        assert template["imageSize"] == "cover"
        assert template["title"] == "Title"
        assert message["quickReply"] == QUICK_REPLY

    def test_confirm_template(self):
        actions = [{"type": "message", "label": "Yes", "text": "yes"}, {"type": "message", "label": "No", "text": "no"}]
        assert createConfirmTemplate("alt", "Sure?", actions)["template"] == {
            "type": "confirm",
            "text": "Sure?",
            "actions": actions,
        }

    def test_carousel_templates(self):
        columns = [{"text": "c1", "actions": []}]
        assert createCarouselTemplate("alt", columns)["template"] == {"type": "carousel", "columns": columns}
        assert createCarouselTemplate("alt", columns, imageSize=ImageSize.CONTAIN)["template"]["imageSize"] == "contain"
        assert createImageCarouselTemplate("alt", [])["template"] == {"type": "image_carousel", "columns": []}
