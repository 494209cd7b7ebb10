"""Tests for the recommendation prompt."""

from google.genai import types

from travel_recommender.prompts.templates import (
    RECOMMENDATION_SCHEMA,
    build_recommendation_prompt,
    render_template,
)


def test_render_template():
    assert render_template("Trip to {city}", city="Tokyo") == "Trip to Tokyo"


def test_render_template_leaves_unknown_vars():
    assert render_template("{city} {unknown}", city="Tokyo") == "Tokyo {unknown}"


def test_prompt_interpolates_city_and_profile():
    prompt = build_recommendation_prompt("Riga", "Loves craft beer")
    assert "trip to Riga." in prompt
    assert 'The user\'s text description is: "Loves craft beer".' in prompt
    assert '"recommendations"' in prompt


def test_prompt_keeps_values_verbatim():
    prompt = build_recommendation_prompt("{profile}", 'Says "hi" & {city}')
    assert "trip to {profile}." in prompt
    assert 'Says "hi" & {city}' in prompt


def test_schema_shape():
    assert RECOMMENDATION_SCHEMA.type == types.Type.OBJECT
    assert RECOMMENDATION_SCHEMA.required == ["recommendations"]

    items = RECOMMENDATION_SCHEMA.properties["recommendations"].items
    assert items.type == types.Type.OBJECT
    assert set(items.properties) == {"title", "explanation", "activity"}
    assert sorted(items.required) == ["activity", "explanation", "title"]
    assert all(
        prop.type == types.Type.STRING for prop in items.properties.values()
    )
