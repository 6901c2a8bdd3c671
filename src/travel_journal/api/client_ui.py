"""Browser client served alongside the JSON API."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter(tags=["client"])


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def client_ui() -> HTMLResponse:
    """Single-page client for accounts and captions."""
    return HTMLResponse(_CLIENT_UI_HTML)


_CLIENT_UI_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Travel Journal</title>
    <style>
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 2rem; }
      form { display: flex; flex-direction: column; max-width: 360px; gap: 0.5rem; }
      input, textarea { padding: 0.4rem 0.6rem; }
      button { padding: 0.4rem 0.8rem; margin-right: 0.5rem; }
      .caption { border-top: 1px solid #ddd; padding: 1rem 0; }
      .hidden { display: none; }
    </style>
  </head>
  <body>
    <section id="auth">
      <h2 id="auth-title">Login</h2>
      <form id="auth-form">
        <input id="fullName" class="hidden" type="text" placeholder="Full Name" />
        <input id="email" type="email" placeholder="Email" />
        <input id="password" type="password" placeholder="Password" />
        <button id="auth-submit" type="submit">Login</button>
        <button id="auth-toggle" type="button">Need an account?</button>
      </form>
    </section>

    <section id="journal" class="hidden">
      <h1 id="welcome"></h1>
      <button id="logout" type="button">Logout</button>

      <h2>Create Caption</h2>
      <form id="caption-form">
        <input id="title" type="text" placeholder="Title" />
        <textarea id="story" placeholder="Story"></textarea>
        <input id="visitedLocation" type="text" placeholder="Visited Location" />
        <input id="visitedDate" type="date" />
        <input id="image" type="file" accept="image/*" />
        <img id="preview" class="hidden" alt="Uploaded" width="200" />
        <button type="submit">Create Caption</button>
      </form>

      <h2>Your Captions</h2>
      <button id="load-captions" type="button">Load Captions</button>
      <div id="captions"></div>
    </section>

    <script>
      let isLogin = true;
      let token = null;
      let user = null;
      let imageUrl = '';

      const byId = (id) => document.getElementById(id);

      async function request(path, options = {}) {
        const headers = options.headers || {};
        if (token) headers['Authorization'] = 'Bearer ' + token;
        const res = await fetch(path, { ...options, headers });
        const data = await res.json();
        if (!res.ok) {
          const error = new Error(data.message || 'Request failed');
          error.status = res.status;
          throw error;
        }
        return data;
      }

      function postJson(path, body) {
        return request(path, {
          method: 'POST',
          headers: { 'Content-Type': 'application/json' },
          body: JSON.stringify(body),
        });
      }

      function render() {
        byId('auth').classList.toggle('hidden', !!user);
        byId('journal').classList.toggle('hidden', !user);
        byId('fullName').classList.toggle('hidden', isLogin);
        byId('auth-title').textContent = isLogin ? 'Login' : 'Create Account';
        byId('auth-submit').textContent = isLogin ? 'Login' : 'Create Account';
        byId('auth-toggle').textContent = isLogin
          ? 'Need an account?'
          : 'Already have an account?';
        if (user) byId('welcome').textContent = 'Welcome, ' + user.fullName;
      }

      function renderCaptions(captions) {
        const container = byId('captions');
        container.replaceChildren();
        for (const caption of captions) {
          const item = document.createElement('div');
          item.className = 'caption';
          const title = document.createElement('h3');
          title.textContent = caption.title;
          const story = document.createElement('p');
          story.textContent = caption.story;
          const location = document.createElement('p');
          location.textContent = 'Location: ' + caption.visitedLocation;
          const visited = document.createElement('p');
          visited.textContent = 'Date: ' + new Date(caption.visitedDate).toLocaleDateString();
          const image = document.createElement('img');
          image.src = caption.imageUrl;
          image.alt = caption.title;
          image.width = 300;
          item.append(title, story, location, visited, image);
          container.append(item);
        }
      }

      async function fetchCaptions() {
        try {
          const data = await request('/get-caption');
          renderCaptions(data.stories);
        } catch (error) {
          console.error('Fetch captions error:', error);
        }
      }

      byId('auth-toggle').addEventListener('click', () => {
        isLogin = !isLogin;
        render();
      });

      byId('auth-form').addEventListener('submit', async (event) => {
        event.preventDefault();
        const body = {
          email: byId('email').value,
          password: byId('password').value,
        };
        if (!isLogin) body.fullName = byId('fullName').value;
        try {
          const data = await postJson(isLogin ? '/login' : '/create-account', body);
          token = data.accessToken;
          user = data.user;
          isLogin = true;
          render();
        } catch (error) {
          console.error('Authentication error:', error);
          alert(error.message || 'Authentication failed');
        }
      });

      byId('image').addEventListener('change', async (event) => {
        const file = event.target.files[0];
        if (!file) return;
        const formData = new FormData();
        formData.append('image', file);
        try {
          const data = await request('/image-upload', { method: 'POST', body: formData });
          imageUrl = data.imageUrl;
          byId('preview').src = imageUrl;
          byId('preview').classList.remove('hidden');
        } catch (error) {
          console.error('Image upload error:', error);
        }
      });

      byId('caption-form').addEventListener('submit', async (event) => {
        event.preventDefault();
        try {
          await postJson('/caption', {
            title: byId('title').value,
            story: byId('story').value,
            visitedLocation: byId('visitedLocation').value,
            visitedDate: byId('visitedDate').value,
            imageUrl,
          });
          byId('caption-form').reset();
          byId('preview').classList.add('hidden');
          imageUrl = '';
          fetchCaptions();
        } catch (error) {
          console.error('Create caption error:', error);
        }
      });

      byId('load-captions').addEventListener('click', fetchCaptions);

      byId('logout').addEventListener('click', () => {
        token = null;
        user = null;
        renderCaptions([]);
        render();
      });

      render();
    </script>
  </body>
</html>
"""
