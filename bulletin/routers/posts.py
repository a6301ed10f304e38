import uuid

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from bulletin.database import get_db
from bulletin.schemas import PostCreate, PostResponse, PostUpdate
from bulletin.services import post_service

router = APIRouter(prefix="/post", tags=["posts"])

@router.post("/create_post", response_model=uuid.UUID)
async def create_post(data: PostCreate, db: AsyncSession = Depends(get_db)):
    return await post_service.create_post(db, data)

@router.get("/get_post/{post_id}", response_model=PostResponse)
async def get_post(post_id: uuid.UUID, db: AsyncSession = Depends(get_db)):
    post = await post_service.get_post(db, post_id)
    if not post:
        raise HTTPException(status_code=404, detail="Post not found")
    return post

@router.get("/list_posts", response_model=list[PostResponse])
async def list_posts(db: AsyncSession = Depends(get_db)):
    return await post_service.list_posts(db)

@router.get("/list_all_posts", response_model=list[PostResponse])
async def list_all_posts(db: AsyncSession = Depends(get_db)):
    return await post_service.list_all_posts(db)

@router.get("/list_deleted_posts", response_model=list[PostResponse])
async def list_deleted_posts(db: AsyncSession = Depends(get_db)):
    return await post_service.list_deleted_posts(db)

@router.put("/update_post/{post_id}")
async def update_post(post_id: uuid.UUID, data: PostUpdate, db: AsyncSession = Depends(get_db)):
    if not await post_service.update_post(db, post_id, data):
        raise HTTPException(status_code=404, detail="Post not found")

@router.delete("/delete_post/{post_id}")
async def delete_post(post_id: uuid.UUID, db: AsyncSession = Depends(get_db)):
    if not await post_service.delete_post(db, post_id):
        raise HTTPException(status_code=404, detail="Post not found")

@router.delete("/remove_post/{post_id}")
async def remove_post(post_id: uuid.UUID, db: AsyncSession = Depends(get_db)):
    if not await post_service.remove_post(db, post_id):
        raise HTTPException(status_code=404, detail="Post not found")
