from mangum import Mangum
from app.main import app

# Tables are managed outside Lambda, so the start-up hook is skipped.
handler = Mangum(app, lifespan="off")
