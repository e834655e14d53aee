from django.db import migrations

DEFAULT_TEMPLATES = [
    {
        "type": "reflective",
        "category": "all",
        "title": "Validate Feelings",
        "template": "It sounds like you're experiencing {feeling}. That must be really {impact} for you. Thank you for sharing this with us.",
        "placeholders": ["{feeling}", "{impact}"],
        "example_usage": "It sounds like you're experiencing a lot of anxiety. That must be really overwhelming for you.",
    },
    {
        "type": "reflective",
        "category": "anxiety",
        "title": "Acknowledge Anxiety",
        "template": "I hear that you're feeling anxious about {situation}. Anxiety can be incredibly challenging, and your feelings are valid.",
        "placeholders": ["{situation}"],
        "example_usage": "I hear that you're feeling anxious about your upcoming presentation.",
    },
    {
        "type": "reflective",
        "category": "depression",
        "title": "Acknowledge Depression",
        "template": "What you're describing sounds really difficult. Feeling {feeling} when dealing with depression is a common experience, and you're not alone in this.",
        "placeholders": ["{feeling}"],
        "example_usage": "What you're describing sounds really difficult. Feeling hopeless when dealing with depression is a common experience.",
    },
    {
        "type": "encouragement",
        "category": "all",
        "title": "Affirm Strength",
        "template": "The fact that you're reaching out and talking about this shows incredible strength. Taking this step is not easy, and you should be proud of yourself.",
        "placeholders": [],
        "example_usage": "The fact that you're reaching out shows incredible strength.",
    },
    {
        "type": "encouragement",
        "category": "self-care",
        "title": "Celebrate Progress",
        "template": "Every small step counts. {action} is a meaningful act of self-care, and recognizing that is a positive sign.",
        "placeholders": ["{action}"],
        "example_usage": "Every small step counts. Taking a walk today is a meaningful act of self-care.",
    },
    {
        "type": "next_steps",
        "category": "all",
        "title": "Gentle Suggestion",
        "template": "When you feel ready, you might consider {suggestion}. There's no pressure, move at your own pace.",
        "placeholders": ["{suggestion}"],
        "example_usage": "When you feel ready, you might consider talking to a trusted friend about this.",
    },
    {
        "type": "next_steps",
        "category": "anxiety",
        "title": "Grounding Technique",
        "template": "A technique that many find helpful is the 5-4-3-2-1 grounding exercise: identify 5 things you can see, 4 you can touch, 3 you can hear, 2 you can smell, and 1 you can taste.",
        "placeholders": [],
        "example_usage": "A technique that many find helpful is the 5-4-3-2-1 grounding exercise.",
    },
    {
        "type": "resource",
        "category": "all",
        "title": "Crisis Resources",
        "template": "If you're in crisis, please know that help is available 24/7. You can call the 988 Suicide & Crisis Lifeline or text HOME to 741741 to reach a trained crisis counselor.",
        "placeholders": [],
        "example_usage": "If you're in crisis, please know that help is available 24/7.",
    },
]


def seed_templates(apps, schema_editor):
    ResponseTemplate = apps.get_model("professionals", "ResponseTemplate")
    for template in DEFAULT_TEMPLATES:
        ResponseTemplate.objects.get_or_create(
            type=template["type"], title=template["title"], defaults=template
        )


def remove_templates(apps, schema_editor):
    ResponseTemplate = apps.get_model("professionals", "ResponseTemplate")
    ResponseTemplate.objects.filter(
        title__in=[template["title"] for template in DEFAULT_TEMPLATES],
        created_by__isnull=True,
    ).delete()


class Migration(migrations.Migration):
    dependencies = [
        ("professionals", "0001_initial"),
    ]

    operations = [
        migrations.RunPython(seed_templates, remove_templates),
    ]
