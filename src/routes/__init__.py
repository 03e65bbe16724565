from routes.accounts import router as accounts_router
from routes.users import router as users_router
from routes.watchlist import router as watchlist_router
from routes.favorites import router as favorites_router
from routes.diary import router as diary_router
from routes.follows import router as follows_router
from routes.lists import router as lists_router
from routes.tmdb import router as tmdb_router
from routes.recommendations import router as recommendations_router
