user_registration_request_schema_example = {
    "username": "film_buff",
    "email": "film_buff@example.com",
    "password": "StrongPassword123!"
}

user_schema_example = {
    "id": 7,
    "username": "film_buff",
    "email": "film_buff@example.com",
    "bio": "Mostly noir and Ghibli.",
    "avatarUrl": "https://images.example.com/avatars/7.png",
    "createdAt": "2025-05-23T08:08:49.805Z"
}

user_login_request_schema_example = {
    "username": "film_buff",
    "password": "StrongPassword123!"
}

user_login_response_schema_example = {
    "accessToken": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
    "refreshToken": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
    "tokenType": "bearer"
}

user_update_request_schema_example = {
    "bio": "Rewatching everything by Kurosawa this year.",
    "avatarUrl": "https://images.example.com/avatars/7-new.png"
}
