from app.models.creator import CreatorRecord


def make_creator(
    creator_id,
    name="Creator",
    *,
    genre="Lifestyle",
    platform=None,
    location=None,
    details_location=None,
    tags=None,
    pricing=None,
    followers=None,
    total_views=None,
    average_views=None,
) -> CreatorRecord:
    analytics = {}
    if followers is not None:
        analytics["followers"] = followers
    if total_views is not None:
        analytics["totalViews"] = total_views
    if average_views is not None:
        analytics["averageViews"] = average_views

    details = {"analytics": analytics}
    if details_location is not None:
        details["location"] = details_location
    if tags is not None:
        details["tags"] = tags
    if pricing is not None:
        details["pricing"] = pricing

    payload = {"_id": creator_id, "name": name, "genre": genre, "details": details}
    if platform is not None:
        payload["platform"] = platform
    if location is not None:
        payload["location"] = location
    return CreatorRecord.model_validate(payload)
