"""Saved recipe routes"""

from fastapi import APIRouter, Depends, Query, status
from typing import List, Optional

from api.dependencies import CurrentUserId, DbSession, get_current_user_id
from domain.mappers import RecipeMapper
from domain.schemas import MessageResponse, RecipeCreate, RecipeResponse, RecipeUpdate
from services.recipe_service import RecipeService

router = APIRouter(
    prefix="/recipes", tags=["Recipes"], dependencies=[Depends(get_current_user_id)]
)


@router.get("", response_model=List[RecipeResponse])
def list_recipes(user_id: CurrentUserId, db: DbSession):
    return [RecipeMapper.to_response(r) for r in RecipeService.list_recipes(db, user_id)]


@router.get("/search", response_model=List[RecipeResponse])
def search_recipes(user_id: CurrentUserId, db: DbSession, q: Optional[str] = Query(None)):
    """Case-insensitive name search; an empty query is rejected."""
    recipes = RecipeService.search_recipes(db, user_id, q)
    return [RecipeMapper.to_response(r) for r in recipes]


@router.get("/{recipe_id}", response_model=RecipeResponse)
def get_recipe(recipe_id: str, user_id: CurrentUserId, db: DbSession):
    return RecipeMapper.to_response(RecipeService.get_recipe(db, user_id, recipe_id))


@router.post("", response_model=RecipeResponse, status_code=status.HTTP_201_CREATED)
def create_recipe(payload: RecipeCreate, user_id: CurrentUserId, db: DbSession):
    return RecipeMapper.to_response(RecipeService.create_recipe(db, user_id, payload))


@router.put("/{recipe_id}", response_model=RecipeResponse)
def update_recipe(
    recipe_id: str, payload: RecipeUpdate, user_id: CurrentUserId, db: DbSession
):
    recipe = RecipeService.update_recipe(db, user_id, recipe_id, payload)
    return RecipeMapper.to_response(recipe)


@router.delete("/{recipe_id}", response_model=MessageResponse)
def delete_recipe(recipe_id: str, user_id: CurrentUserId, db: DbSession):
    RecipeService.delete_recipe(db, user_id, recipe_id)
    return MessageResponse(message="Recipe deleted successfully")
