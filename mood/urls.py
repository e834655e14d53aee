# mood/urls.py
from rest_framework.routers import SimpleRouter
from mood.views import MoodEntryViewSet

router = SimpleRouter()
# Accept both "/api/mood/history" and "/api/mood/history/"
router.trailing_slash = "/?"
router.register(r"mood", MoodEntryViewSet, basename="mood")

urlpatterns = router.urls
