"""Basic usage examples for the OpenWeather client."""

import os
import sys

from openweather import OpenWeatherAPIError, OpenWeatherClient


def main() -> None:
    city = sys.argv[1] if len(sys.argv) > 1 else "London"

    with OpenWeatherClient(api_key=os.environ.get("OPENWEATHER_API_KEY")) as ow:
        print(f"=== Current conditions in {city} ===")
        try:
            current = ow.current_weather(q=city)
        except OpenWeatherAPIError as exc:
            print(f"  {exc.message}")
            return

        print(f"  {current.name}, {current.sys.country} ({current.coord.lat}, {current.coord.lon})")
        print(f"  {current.condition.description}: {current.main.temp}°C "
              f"(feels like {current.main.feels_like}°C)")
        print(f"  Humidity: {current.main.humidity}%, Wind: {current.wind.speed} m/s")

        # One sample per day out of the 3-hour forecast
        print(f"\n=== Forecast ===")
        forecast = ow.forecast(q=city)
        for entry in forecast.entries[::8][:5]:
            print(f"  {entry.dt_txt}: {entry.main.temp}°C, {entry.condition.description}")


if __name__ == "__main__":
    main()
