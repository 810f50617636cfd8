"""HTML pages that consume the JSON API."""

from __future__ import annotations

import html
from typing import TYPE_CHECKING
from uuid import UUID

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from talent_manager.api.auth import get_access_token
from talent_manager.domain.bookings import BOOKING_STATUSES
from talent_manager.domain.errors import AuthenticationError, NotFoundError

if TYPE_CHECKING:
    from talent_manager.containers import AppContainer

router = APIRouter(tags=["ui"], include_in_schema=False)


@router.get("/")
async def index() -> RedirectResponse:
    """Send visitors to the dashboard."""
    return RedirectResponse("/dashboard", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/sign-in", response_class=HTMLResponse)
async def sign_in_page() -> HTMLResponse:
    """Sign-in and sign-up form."""
    return HTMLResponse(_SIGN_IN_HTML)


@router.get("/dashboard", response_model=None)
async def dashboard(
    request: Request, access_token: str | None = Depends(get_access_token)
) -> HTMLResponse | RedirectResponse:
    """Dashboard for the signed-in user; redirects when there is no session."""
    container: AppContainer = request.app.state.container
    try:
        user = container.auth_service.require_user(access_token)
    except AuthenticationError:
        return RedirectResponse("/sign-in", status_code=status.HTTP_303_SEE_OTHER)
    metadata = user.user_metadata
    full_name = (
        f"{metadata.get('first_name') or 'N/A'} {metadata.get('last_name') or 'N/A'}"
    )
    page = _DASHBOARD_HTML.format(
        full_name=html.escape(full_name),
        email=html.escape(user.email or ""),
        role=html.escape(str(metadata.get("role") or "N/A")),
        user_id=html.escape(str(user.id)),
        status_options="".join(
            f'<option value="{value}">{value}</option>' for value in BOOKING_STATUSES
        ),
    )
    return HTMLResponse(page)


@router.get("/profile/{artist_id}", response_model=None)
async def artist_profile(
    artist_id: UUID,
    request: Request,
    access_token: str | None = Depends(get_access_token),
) -> HTMLResponse | RedirectResponse:
    """Read-only profile page for one artist."""
    container: AppContainer = request.app.state.container
    try:
        container.auth_service.require_user(access_token)
    except AuthenticationError:
        return RedirectResponse("/sign-in", status_code=status.HTTP_303_SEE_OTHER)
    try:
        artist = container.artist_service.get_artist(artist_id)
    except NotFoundError:
        return HTMLResponse(_NOT_FOUND_HTML, status_code=status.HTTP_404_NOT_FOUND)
    fields = {
        name: html.escape(str(getattr(artist, name) or ""))
        for name in (
            "first_name",
            "last_name",
            "email",
            "phone_number",
            "social",
            "address",
            "bio",
        )
    }
    picture = html.escape(artist.profile_picture or "")
    website = html.escape(artist.website or "")
    page = _PROFILE_HTML.format(
        website=(
            f'<a href="{website}" rel="noopener noreferrer">{website}</a>'
            if website.startswith(("http://", "https://"))
            else website
        ),
        picture=(
            f'<img src="{picture}" alt="Profile picture" width="300" />'
            if picture
            else ""
        ),
        **fields,
    )
    return HTMLResponse(page)


_STYLE = """
    <style>
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 2rem; }
      h1 { margin-bottom: 0.5rem; }
      .row { margin-bottom: 1rem; }
      input, select { padding: 0.4rem 0.6rem; margin: 0.2rem 0; }
      button { padding: 0.4rem 0.8rem; margin-right: 0.5rem; }
      table { border-collapse: collapse; width: 100%; }
      td, th { border-bottom: 1px solid #ddd; padding: 0.4rem; text-align: left; }
      .alert { background: #fdecea; color: #a12622; padding: 0.6rem; display: none; }
    </style>
"""

_SIGN_IN_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Talent Manager - Sign in</title>
""" + _STYLE + """
  </head>
  <body>
    <h1 id="heading">Welcome back</h1>
    <div class="alert" id="alert"></div>
    <form id="auth-form">
      <div class="row"><input name="email" type="email" placeholder="Email" required /></div>
      <div class="row"><input name="password" type="password" placeholder="Password" required /></div>
      <div id="sign-up-fields" style="display: none">
        <div class="row"><input name="first_name" placeholder="First name" /></div>
        <div class="row"><input name="last_name" placeholder="Last name" /></div>
        <div class="row"><input name="phone_number" placeholder="Phone number" /></div>
        <div class="row">
          <select name="role">
            <option value="artist">Artist</option>
            <option value="manager">Manager</option>
          </select>
        </div>
      </div>
      <button type="submit" id="submit">Sign in</button>
      <button type="button" onclick="toggleMode()" id="toggle">Create an account</button>
    </form>
    <script>
      let signUp = false;
      function toggleMode() {
        signUp = !signUp;
        document.getElementById('sign-up-fields').style.display = signUp ? 'block' : 'none';
        document.getElementById('heading').textContent = signUp ? 'Create an account' : 'Welcome back';
        document.getElementById('submit').textContent = signUp ? 'Sign up' : 'Sign in';
        document.getElementById('toggle').textContent = signUp ? 'I already have an account' : 'Create an account';
      }
      document.getElementById('auth-form').addEventListener('submit', async (event) => {
        event.preventDefault();
        const data = Object.fromEntries(new FormData(event.target).entries());
        const alertBox = document.getElementById('alert');
        alertBox.style.display = 'none';
        const path = signUp ? '/auth/sign-up' : '/auth/sign-in';
        const res = await fetch(path, {
          method: 'POST',
          headers: { 'Content-Type': 'application/json' },
          body: JSON.stringify(data)
        });
        const body = await res.json();
        if (!res.ok) {
          alertBox.textContent = body.error || 'Authentication failed';
          alertBox.style.display = 'block';
          return;
        }
        if (signUp) {
          alertBox.textContent = 'Check your email for the confirmation link!';
          alertBox.style.display = 'block';
          toggleMode();
          return;
        }
        window.location.href = '/dashboard';
      });
    </script>
  </body>
</html>
"""

_DASHBOARD_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Talent Manager</title>
""" + _STYLE.replace("{", "{{").replace("}", "}}") + """
  </head>
  <body>
    <h1>Dashboard</h1>
    <div class="row">
      <strong>{full_name}</strong> ({role}) &middot; {email}
      <button onclick="signOut()">Sign out</button>
    </div>
    <div class="alert" id="alert"></div>

    <h2>Artists</h2>
    <table>
      <thead><tr><th>Name</th><th>Email</th><th>Phone</th><th></th></tr></thead>
      <tbody id="artists"></tbody>
    </table>
    <h3>Add artist</h3>
    <form id="artist-form">
      <input name="first_name" placeholder="First name" required />
      <input name="last_name" placeholder="Last name" required />
      <input name="email" type="email" placeholder="Email" required />
      <input name="phone_number" placeholder="Phone number" />
      <input name="social" placeholder="Social" />
      <input name="profile_picture" type="file" accept="image/*" />
      <input name="manager_id" type="hidden" value="{user_id}" />
      <button type="submit">Add artist</button>
    </form>

    <h2 id="bookings-title">Bookings</h2>
    <table>
      <thead><tr><th>Title</th><th>Start</th><th>End</th><th>Status</th><th></th></tr></thead>
      <tbody id="bookings"></tbody>
    </table>
    <form id="booking-form" style="display: none">
      <input name="title" placeholder="Title" required />
      <input name="start" type="datetime-local" required />
      <input name="end" type="datetime-local" required />
      <select name="status">{status_options}</select>
      <button type="submit">Add booking</button>
    </form>

    <script>
      let selectedArtist = null;
      function showError(message) {{
        const alertBox = document.getElementById('alert');
        alertBox.textContent = message;
        alertBox.style.display = 'block';
      }}
      async function call(path, options) {{
        const res = await fetch(path, options);
        if (res.status === 401) {{
          window.location.href = '/sign-in';
          return null;
        }}
        const body = await res.json();
        if (!res.ok) {{
          showError(body.error || ('Error: ' + res.status));
          return null;
        }}
        return body;
      }}
      function cell(text) {{
        const td = document.createElement('td');
        td.textContent = text || '';
        return td;
      }}
      function button(label, handler) {{
        const b = document.createElement('button');
        b.textContent = label;
        b.onclick = handler;
        return b;
      }}
      async function loadArtists() {{
        const artists = await call('/artists', {{}});
        if (!artists) return;
        const body = document.getElementById('artists');
        body.innerHTML = '';
        for (const artist of artists) {{
          const tr = document.createElement('tr');
          tr.appendChild(cell(artist.first_name + ' ' + artist.last_name));
          tr.appendChild(cell(artist.email));
          tr.appendChild(cell(artist.phone_number));
          const actions = document.createElement('td');
          actions.appendChild(button('Bookings', () => selectArtist(artist)));
          actions.appendChild(button('Profile', () => {{ window.location.href = '/profile/' + artist.id; }}));
          actions.appendChild(button('Edit', () => editArtist(artist)));
          actions.appendChild(button('Delete', () => deleteArtist(artist.id)));
          tr.appendChild(actions);
          body.appendChild(tr);
        }}
      }}
      async function editArtist(artist) {{
        const changes = {{}};
        for (const field of ['first_name', 'last_name', 'email', 'phone_number']) {{
          const value = window.prompt(field.replace('_', ' '), artist[field] || '');
          if (value === null) return;
          if (value !== (artist[field] || '')) changes[field] = value;
        }}
        const updated = await call('/artists/' + artist.id, {{
          method: 'PUT',
          headers: {{ 'Content-Type': 'application/json' }},
          body: JSON.stringify(changes)
        }});
        if (updated) loadArtists();
      }}
      async function deleteArtist(id) {{
        if (!window.confirm('Are you sure you want to delete this artist?')) return;
        if (await call('/artists/' + id, {{ method: 'DELETE' }})) loadArtists();
      }}
      async function selectArtist(artist) {{
        selectedArtist = artist;
        document.getElementById('bookings-title').textContent =
          'Bookings for ' + artist.first_name + ' ' + artist.last_name;
        document.getElementById('booking-form').style.display = 'block';
        loadBookings();
      }}
      async function loadBookings() {{
        const bookings = await call('/bookings/' + selectedArtist.id, {{}});
        if (!bookings) return;
        const body = document.getElementById('bookings');
        body.innerHTML = '';
        for (const booking of bookings) {{
          const tr = document.createElement('tr');
          tr.appendChild(cell(booking.title));
          tr.appendChild(cell(new Date(booking.start).toLocaleString()));
          tr.appendChild(cell(new Date(booking.end).toLocaleString()));
          tr.appendChild(cell(booking.status));
          const actions = document.createElement('td');
          actions.appendChild(button('Delete', async () => {{
            const path = '/bookings/' + selectedArtist.id + '?id=' + booking.id;
            if (await call(path, {{ method: 'DELETE' }})) loadBookings();
          }}));
          tr.appendChild(actions);
          body.appendChild(tr);
        }}
      }}
      document.getElementById('artist-form').addEventListener('submit', async (event) => {{
        event.preventDefault();
        const created = await call('/artists', {{ method: 'POST', body: new FormData(event.target) }});
        if (created) {{
          event.target.reset();
          loadArtists();
        }}
      }});
      document.getElementById('booking-form').addEventListener('submit', async (event) => {{
        event.preventDefault();
        const data = Object.fromEntries(new FormData(event.target).entries());
        data.start = new Date(data.start).toISOString();
        data.end = new Date(data.end).toISOString();
        const created = await call('/bookings/' + selectedArtist.id, {{
          method: 'POST',
          headers: {{ 'Content-Type': 'application/json' }},
          body: JSON.stringify(data)
        }});
        if (created) {{
          event.target.reset();
          loadBookings();
        }}
      }});
      async function signOut() {{
        await fetch('/auth/sign-out', {{ method: 'POST' }});
        window.location.href = '/sign-in';
      }}
      loadArtists();
    </script>
  </body>
</html>
"""

_PROFILE_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>{first_name} {last_name}</title>
""" + _STYLE.replace("{", "{{").replace("}", "}}") + """
  </head>
  <body>
    <p><a href="/dashboard">Back to dashboard</a></p>
    {picture}
    <h1>{first_name} {last_name}</h1>
    <div class="row"><strong>Email:</strong> {email}</div>
    <div class="row"><strong>Phone:</strong> {phone_number}</div>
    <div class="row"><strong>Website:</strong> {website}</div>
    <div class="row"><strong>Social:</strong> {social}</div>
    <div class="row"><strong>Address:</strong> {address}</div>
    <h2>Biography</h2>
    <p>{bio}</p>
  </body>
</html>
"""

_NOT_FOUND_HTML = """<!doctype html>
<html lang="en">
  <head><meta charset="utf-8" /><title>Artist not found</title></head>
  <body>
    <h1>Artist not found</h1>
    <p><a href="/dashboard">Back to dashboard</a></p>
  </body>
</html>
"""
