from pydantic import BaseModel


class DocumentCreate(BaseModel):
    """Данные формы создания документа"""
    file_name: str = ""


class DocumentUpdate(BaseModel):
    """Данные формы редактирования документа"""
    content: str = ""


class DocumentEditForm(BaseModel):
    """Данные для отображения формы редактирования"""
    name: str
    extension: str
    content: str
