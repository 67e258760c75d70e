"""Entry: python main.py match "intent"  |  python main.py format <path>  |  python main.py list"""
from skillhook.main import main

if __name__ == "__main__":
    main()
