"""Flash messages and form errors shared by the administration screens."""

CREATED_MESSAGE = "登録に成功しました"
UPDATED_MESSAGE = "更新に成功しました"
DELETED_MESSAGE = "削除に成功しました"

INVALID_IMAGE_MESSAGE = "画像ファイルが不正です"

NON_FIELD_ERRORS = "__all__"
