WINDOW_TITLE = "Tasks"

# 布局
CONTENT_MARGIN = 16
SECTION_SPACING = 10
ROW_SPACING = 5
ROW_PADDING = 8
LIST_MAX_HEIGHT = 300
ACTION_BTN_SIZE = 32

# 颜色
FIELD_BG = "rgba(128, 128, 128, 51)"  # gray, 20% opacity
ADD_BTN_BG = "#000000"
ADD_BTN_FG = "#FFFFFF"
COMPLETED_COLOR = "#34C759"
PENDING_COLOR = "#8E8E93"
DELETE_COLOR = "#FF3B30"

# 操作图标
ICON_COMPLETED = "✔"
ICON_PENDING = "○"
ICON_DELETE = "✕"
