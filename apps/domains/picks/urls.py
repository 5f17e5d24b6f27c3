# apps/domains/picks/urls.py
from django.urls import path

from .views.entry_view import EntrySubmitView, EntryDetailView, EntryScoreView
from .views.master_view import MasterSheetView
from .views.question_view import QuestionCatalogView
from .views.scoreboard_view import ScoreboardView

urlpatterns = [
    path("questions/", QuestionCatalogView.as_view(), name="picks-questions"),
    path("entries/", EntrySubmitView.as_view(), name="picks-entry-submit"),
    path("entries/<str:entry_id>/", EntryDetailView.as_view(), name="picks-entry-detail"),
    path("entries/<str:entry_id>/score/", EntryScoreView.as_view(), name="picks-entry-score"),
    path("scoreboard/", ScoreboardView.as_view(), name="picks-scoreboard"),

    # =========================
    # Admin (staff only)
    # =========================
    path("admin/master/", MasterSheetView.as_view(), name="picks-admin-master"),
]
