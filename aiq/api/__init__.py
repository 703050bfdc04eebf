"""API router for v1 endpoints."""

from fastapi import APIRouter

from aiq.api import assessment

router = APIRouter()

# Scoring, submission and certificate verification routes
router.include_router(assessment.router, tags=["assessment"])
