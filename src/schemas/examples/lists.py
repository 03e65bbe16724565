list_create_schema_example = {
    "name": "Rainy Sunday",
    "description": "Slow films for slow days.",
    "isPublic": True
}

list_schema_example = {
    "id": 5,
    "userId": 7,
    "name": "Rainy Sunday",
    "description": "Slow films for slow days.",
    "isPublic": True,
    "createdAt": "2025-05-23T08:08:49.805Z"
}

list_item_schema_example = {
    "id": 44,
    "listId": 5,
    "movieId": 129,
    "notes": "Start here.",
    "addedAt": "2025-05-23T08:08:49.805Z"
}
