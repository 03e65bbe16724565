watchlist_item_schema_example = {
    "id": 12,
    "userId": 7,
    "movieId": 550,
    "addedAt": "2025-05-23T08:08:49.805Z"
}

favorite_schema_example = {
    "id": 3,
    "userId": 7,
    "movieId": 42,
    "addedAt": "2025-05-23T08:08:49.805Z"
}

diary_entry_create_schema_example = {
    "movieId": 550,
    "watchedDate": "2025-05-22T21:30:00Z",
    "rating": 4,
    "review": "Second watch holds up.",
    "liked": True
}

diary_entry_schema_example = {
    "id": 31,
    "userId": 7,
    "movieId": 550,
    "watchedAt": "2025-05-22T21:30:00Z",
    "rating": 4,
    "review": "Second watch holds up.",
    "liked": True
}
