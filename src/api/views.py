"""Server-rendered HTML pages for the admin dashboard."""

from html import escape
from urllib.parse import quote, urlencode

from domain.model.dashboard import DashboardStats
from domain.model.notification import Notification, NotificationLevel
from domain.model.post import PostRecord
from services.table_presenter import TablePage, format_date

_TOAST_CLASSES = {
    NotificationLevel.SUCCESS: "bg-green-50 border-green-300 text-green-800",
    NotificationLevel.ERROR: "bg-red-50 border-red-300 text-red-800",
}


def _format_number(num: int) -> str:
    """Format number with thousand separators."""
    return f"{num:,}"


def _page(title: str, body: str, notifications: list[Notification]) -> str:
    toasts = "".join(
        f'<div class="toast mb-2 px-4 py-3 rounded border {_TOAST_CLASSES[n.level]}" '
        f'data-level="{n.level.value}">{escape(n.message)}</div>'
        for n in notifications
    )
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{escape(title)} - Admin</title>
    <script src="https://cdn.tailwindcss.com"></script>
</head>
<body class="bg-gray-50">
    <div class="fixed top-4 right-4 z-50 w-80">{toasts}</div>
    {body}
</body>
</html>"""


def render_loading(notifications: list[Notification]) -> str:
    body = """
    <div class="flex items-center justify-center min-h-screen">
        <div class="h-8 w-8 animate-spin rounded-full border-4 border-gray-300 border-t-gray-900"></div>
    </div>"""
    return _page("Loading", body, notifications)


def render_access_denied(notifications: list[Notification]) -> str:
    body = """
    <div class="flex items-center justify-center min-h-screen">
        <p>Access denied. Admin privileges required.</p>
    </div>"""
    return _page("Access denied", body, notifications)


def _stat_card(label: str, value: int) -> str:
    return f"""
        <div class="bg-white rounded-lg shadow p-6">
            <div class="text-sm font-medium text-gray-600 mb-1">{label}</div>
            <div class="text-2xl font-bold" data-stat="{label}">{_format_number(value)}</div>
        </div>"""


def _user_rows(table: TablePage) -> str:
    if not table.rows:
        return """
                <tr><td colspan="4" class="text-center py-8 text-gray-500">No users found</td></tr>"""

    rows = []
    for user in table.rows:
        rows.append(f"""
                <tr class="border-t" data-user-id="{escape(user.id)}">
                    <td class="py-2">{escape(user.display_name)}</td>
                    <td class="py-2">{escape(user.email)}</td>
                    <td class="py-2">{escape(format_date(user.created_at))}</td>
                    <td class="py-2 text-right">
                        <form method="post" action="/dashboard/users/{escape(quote(user.id, safe=''))}/delete?confirm=yes"
                              onsubmit="return confirm('Are you sure you want to delete this user?')">
                            <button class="px-3 py-1 bg-red-600 text-white rounded text-sm">Delete</button>
                        </form>
                    </td>
                </tr>""")
    return "".join(rows)


def _pagination(table: TablePage, search_term: str) -> str:
    if table.total_pages <= 1:
        return ""

    def link(page: int, label: str, enabled: bool) -> str:
        if not enabled:
            return f'<span class="px-3 py-1 border rounded text-gray-400">{label}</span>'
        query = urlencode({"q": search_term, "page": page})
        return f'<a class="px-3 py-1 border rounded" href="/dashboard?{query}">{label}</a>'

    return f"""
            <div class="flex items-center justify-between mt-4">
                <p class="text-sm text-gray-500">
                    Showing {table.start_index + 1}-{table.end_index} of {table.total_matches} users
                </p>
                <div class="flex items-center space-x-2">
                    {link(table.page - 1, "Previous", table.has_previous)}
                    <span class="text-sm">Page {table.page} of {table.total_pages}</span>
                    {link(table.page + 1, "Next", table.has_next)}
                </div>
            </div>"""


def render_dashboard(
    stats: DashboardStats,
    table: TablePage,
    search_term: str,
    notifications: list[Notification],
) -> str:
    body = f"""
    <div class="container mx-auto p-4 md:p-8">
        <h1 class="text-3xl font-bold mb-8">Dashboard</h1>

        <div class="grid gap-4 md:grid-cols-3 mb-8">
            {_stat_card("Total Users", stats.total_users)}
            {_stat_card("Total Posts", stats.total_posts)}
            {_stat_card("Public Posts", stats.public_posts)}
        </div>

        <div class="bg-white rounded-lg shadow p-6">
            <h2 class="text-xl font-semibold">User Management</h2>
            <p class="text-gray-500 mb-4">Manage your platform users</p>
            <form method="get" action="/dashboard" class="mb-4">
                <input type="text" name="q" value="{escape(search_term)}"
                       placeholder="Search users by name or email..."
                       class="w-full px-3 py-2 border border-gray-300 rounded-md">
            </form>
            <table class="w-full">
                <thead>
                    <tr class="text-left text-gray-600">
                        <th>Name</th><th>Email</th><th>Joined</th><th class="text-right">Actions</th>
                    </tr>
                </thead>
                <tbody>{_user_rows(table)}
                </tbody>
            </table>{_pagination(table, search_term)}
        </div>
    </div>"""
    return _page("Dashboard", body, notifications)


def render_posts(posts: list[PostRecord], notifications: list[Notification]) -> str:
    if not posts:
        content = '<div class="text-center text-gray-500">No posts found</div>'
    else:
        cards = "".join(f"""
            <div class="bg-white rounded-lg shadow p-6 flex flex-col" data-post-id="{escape(post.id)}">
                <h2 class="font-semibold">{escape(post.title)}</h2>
                <p class="text-sm text-gray-500">{escape(format_date(post.created_at))}</p>
                <p class="text-sm text-gray-600 line-clamp-3 flex-grow mt-2">{escape(post.content)}</p>
                <span class="text-sm text-gray-500 mt-4">{"Public" if post.is_public else "Private"}</span>
            </div>""" for post in posts)
        content = f'<div class="grid gap-4 md:grid-cols-2 lg:grid-cols-3">{cards}</div>'

    body = f"""
    <div class="container mx-auto p-4 md:p-8">
        <h1 class="text-3xl font-bold mb-8">Posts</h1>
        {content}
    </div>"""
    return _page("Posts", body, notifications)
