"""Monitored city dataset and the default watch-list.

AQI values are representative baseline readings shown before live
measurements arrive; they are not updated at runtime.
"""

from typing import Tuple

from src.data.models import CityRecord

CITY_DATASET: Tuple[CityRecord, ...] = (
    # South Asia
    CityRecord("delhi", "New Delhi", "India", "South Asia", 28.6139, 77.2090, 182, "PM2.5"),
    CityRecord("mumbai", "Mumbai", "India", "South Asia", 19.0760, 72.8777, 118, "PM10"),
    CityRecord("kolkata", "Kolkata", "India", "South Asia", 22.5726, 88.3639, 156, "PM2.5"),
    CityRecord("chennai", "Chennai", "India", "South Asia", 13.0827, 80.2707, 84, "PM10"),
    CityRecord("bengaluru", "Bengaluru", "India", "South Asia", 12.9716, 77.5946, 76, "PM2.5"),
    CityRecord("hyderabad", "Hyderabad", "India", "South Asia", 17.3850, 78.4867, 92, "PM2.5"),
    CityRecord("ahmedabad", "Ahmedabad", "India", "South Asia", 23.0225, 72.5714, 134, "PM10"),
    CityRecord("pune", "Pune", "India", "South Asia", 18.5204, 73.8567, 88, "PM2.5"),
    CityRecord("jaipur", "Jaipur", "India", "South Asia", 26.9124, 75.7873, 142, "PM10"),
    CityRecord("lucknow", "Lucknow", "India", "South Asia", 26.8467, 80.9462, 168, "PM2.5"),
    CityRecord("kanpur", "Kanpur", "India", "South Asia", 26.4499, 80.3319, 176, "PM2.5"),
    CityRecord("patna", "Patna", "India", "South Asia", 25.5941, 85.1376, 171, "PM2.5"),
    CityRecord("varanasi", "Varanasi", "India", "South Asia", 25.3176, 82.9739, 158, "PM2.5"),
    CityRecord("chandigarh", "Chandigarh", "India", "South Asia", 30.7333, 76.7794, 121, "PM2.5"),
    CityRecord("bhopal", "Bhopal", "India", "South Asia", 23.2599, 77.4126, 104, "PM10"),
    CityRecord("nagpur", "Nagpur", "India", "South Asia", 21.1458, 79.0882, 98, "PM10"),
    CityRecord("kochi", "Kochi", "India", "South Asia", 9.9312, 76.2673, 54, "PM2.5"),
    CityRecord("guwahati", "Guwahati", "India", "South Asia", 26.1445, 91.7362, 112, "PM2.5"),
    CityRecord("karachi", "Karachi", "Pakistan", "South Asia", 24.8607, 67.0011, 163, "PM2.5"),
    CityRecord("lahore", "Lahore", "Pakistan", "South Asia", 31.5204, 74.3587, 197, "PM2.5"),
    CityRecord("islamabad", "Islamabad", "Pakistan", "South Asia", 33.6844, 73.0479, 119, "PM2.5"),
    CityRecord("faisalabad", "Faisalabad", "Pakistan", "South Asia", 31.4504, 73.1350, 181, "PM2.5"),
    CityRecord("peshawar", "Peshawar", "Pakistan", "South Asia", 34.0151, 71.5249, 166, "PM10"),
    CityRecord("dhaka", "Dhaka", "Bangladesh", "South Asia", 23.8103, 90.4125, 189, "PM2.5"),
    CityRecord("chittagong", "Chittagong", "Bangladesh", "South Asia", 22.3569, 91.7832, 138, "PM2.5"),
    CityRecord("kathmandu", "Kathmandu", "Nepal", "South Asia", 27.7172, 85.3240, 152, "PM2.5"),
    CityRecord("colombo", "Colombo", "Sri Lanka", "South Asia", 6.9271, 79.8612, 61, "PM2.5"),
    CityRecord("thimphu", "Thimphu", "Bhutan", "South Asia", 27.4728, 89.6390, 38, "PM10"),
    CityRecord("male", "Male", "Maldives", "South Asia", 4.1755, 73.5093, 29, "O3"),
    CityRecord("kabul", "Kabul", "Afghanistan", "South Asia", 34.5553, 69.2075, 148, "PM2.5"),
    # East Asia
    CityRecord("beijing", "Beijing", "China", "East Asia", 39.9042, 116.4074, 128, "PM2.5"),
    CityRecord("shanghai", "Shanghai", "China", "East Asia", 31.2304, 121.4737, 94, "PM2.5"),
    CityRecord("guangzhou", "Guangzhou", "China", "East Asia", 23.1291, 113.2644, 78, "O3"),
    CityRecord("shenzhen", "Shenzhen", "China", "East Asia", 22.5431, 114.0579, 62, "O3"),
    CityRecord("chengdu", "Chengdu", "China", "East Asia", 30.5728, 104.0668, 109, "PM2.5"),
    CityRecord("chongqing", "Chongqing", "China", "East Asia", 29.5630, 106.5516, 102, "PM2.5"),
    CityRecord("wuhan", "Wuhan", "China", "East Asia", 30.5928, 114.3055, 111, "PM2.5"),
    CityRecord("xian", "Xi'an", "China", "East Asia", 34.3416, 108.9398, 137, "PM2.5"),
    CityRecord("tianjin", "Tianjin", "China", "East Asia", 39.3434, 117.3616, 124, "PM2.5"),
    CityRecord("nanjing", "Nanjing", "China", "East Asia", 32.0603, 118.7969, 96, "PM2.5"),
    CityRecord("hangzhou", "Hangzhou", "China", "East Asia", 30.2741, 120.1551, 87, "O3"),
    CityRecord("shenyang", "Shenyang", "China", "East Asia", 41.8057, 123.4315, 118, "PM2.5"),
    CityRecord("harbin", "Harbin", "China", "East Asia", 45.8038, 126.5350, 131, "PM2.5"),
    CityRecord("zhengzhou", "Zhengzhou", "China", "East Asia", 34.7466, 113.6253, 133, "PM2.5"),
    CityRecord("urumqi", "Urumqi", "China", "East Asia", 43.8256, 87.6168, 126, "PM10"),
    CityRecord("lanzhou", "Lanzhou", "China", "East Asia", 36.0611, 103.8343, 117, "PM10"),
    CityRecord("kunming", "Kunming", "China", "East Asia", 25.0389, 102.7183, 46, "O3"),
    CityRecord("hong-kong", "Hong Kong", "China", "East Asia", 22.3193, 114.1694, 58, "NO2"),
    CityRecord("taipei", "Taipei", "Taiwan", "East Asia", 25.0330, 121.5654, 52, "O3"),
    CityRecord("kaohsiung", "Kaohsiung", "Taiwan", "East Asia", 22.6273, 120.3014, 81, "PM2.5"),
    CityRecord("tokyo", "Tokyo", "Japan", "East Asia", 35.6762, 139.6503, 42, "O3"),
    CityRecord("osaka", "Osaka", "Japan", "East Asia", 34.6937, 135.5023, 47, "O3"),
    CityRecord("nagoya", "Nagoya", "Japan", "East Asia", 35.1815, 136.9066, 45, "O3"),
    CityRecord("sapporo", "Sapporo", "Japan", "East Asia", 43.0618, 141.3545, 28, "O3"),
    CityRecord("fukuoka", "Fukuoka", "Japan", "East Asia", 33.5904, 130.4017, 56, "PM2.5"),
    CityRecord("seoul", "Seoul", "South Korea", "East Asia", 37.5665, 126.9780, 74, "PM2.5"),
    CityRecord("busan", "Busan", "South Korea", "East Asia", 35.1796, 129.0756, 59, "PM2.5"),
    CityRecord("incheon", "Incheon", "South Korea", "East Asia", 37.4563, 126.7052, 71, "PM2.5"),
    CityRecord("daegu", "Daegu", "South Korea", "East Asia", 35.8714, 128.6014, 63, "PM2.5"),
    CityRecord("ulaanbaatar", "Ulaanbaatar", "Mongolia", "East Asia", 47.8864, 106.9057, 173, "PM2.5"),
    CityRecord("pyongyang", "Pyongyang", "North Korea", "East Asia", 39.0392, 125.7625, 89, "PM2.5"),
    # Southeast Asia
    CityRecord("bangkok", "Bangkok", "Thailand", "Southeast Asia", 13.7563, 100.5018, 97, "PM2.5"),
    CityRecord("chiang-mai", "Chiang Mai", "Thailand", "Southeast Asia", 18.7883, 98.9853, 144, "PM2.5"),
    CityRecord("jakarta", "Jakarta", "Indonesia", "Southeast Asia", -6.2088, 106.8456, 139, "PM2.5"),
    CityRecord("surabaya", "Surabaya", "Indonesia", "Southeast Asia", -7.2575, 112.7521, 91, "PM2.5"),
    CityRecord("bandung", "Bandung", "Indonesia", "Southeast Asia", -6.9175, 107.6191, 99, "PM2.5"),
    CityRecord("medan", "Medan", "Indonesia", "Southeast Asia", 3.5952, 98.6722, 86, "PM2.5"),
    CityRecord("manila", "Manila", "Philippines", "Southeast Asia", 14.5995, 120.9842, 83, "PM2.5"),
    CityRecord("cebu", "Cebu", "Philippines", "Southeast Asia", 10.3157, 123.8854, 57, "PM2.5"),
    CityRecord("davao", "Davao", "Philippines", "Southeast Asia", 7.1907, 125.4553, 44, "PM10"),
    CityRecord("hanoi", "Hanoi", "Vietnam", "Southeast Asia", 21.0278, 105.8342, 151, "PM2.5"),
    CityRecord("ho-chi-minh-city", "Ho Chi Minh City", "Vietnam", "Southeast Asia", 10.8231, 106.6297, 103, "PM2.5"),
    CityRecord("da-nang", "Da Nang", "Vietnam", "Southeast Asia", 16.0544, 108.2022, 64, "PM2.5"),
    CityRecord("kuala-lumpur", "Kuala Lumpur", "Malaysia", "Southeast Asia", 3.1390, 101.6869, 72, "PM2.5"),
    CityRecord("penang", "George Town", "Malaysia", "Southeast Asia", 5.4141, 100.3288, 55, "PM2.5"),
    CityRecord("singapore", "Singapore", "Singapore", "Southeast Asia", 1.3521, 103.8198, 48, "PM2.5"),
    CityRecord("yangon", "Yangon", "Myanmar", "Southeast Asia", 16.8409, 96.1735, 117, "PM2.5"),
    CityRecord("mandalay", "Mandalay", "Myanmar", "Southeast Asia", 21.9588, 96.0891, 131, "PM2.5"),
    CityRecord("phnom-penh", "Phnom Penh", "Cambodia", "Southeast Asia", 11.5564, 104.9282, 95, "PM2.5"),
    CityRecord("vientiane", "Vientiane", "Laos", "Southeast Asia", 17.9757, 102.6331, 108, "PM2.5"),
    CityRecord("bandar-seri-begawan", "Bandar Seri Begawan", "Brunei", "Southeast Asia", 4.9031, 114.9398, 31, "PM10"),
    CityRecord("dili", "Dili", "Timor-Leste", "Southeast Asia", -8.5569, 125.5603, 41, "PM10"),
    # Central Asia
    CityRecord("tashkent", "Tashkent", "Uzbekistan", "Central Asia", 41.2995, 69.2401, 127, "PM2.5"),
    CityRecord("almaty", "Almaty", "Kazakhstan", "Central Asia", 43.2220, 76.8512, 136, "PM2.5"),
    CityRecord("astana", "Astana", "Kazakhstan", "Central Asia", 51.1605, 71.4704, 82, "PM2.5"),
    CityRecord("bishkek", "Bishkek", "Kyrgyzstan", "Central Asia", 42.8746, 74.5698, 159, "PM2.5"),
    CityRecord("dushanbe", "Dushanbe", "Tajikistan", "Central Asia", 38.5598, 68.7870, 123, "PM10"),
    CityRecord("ashgabat", "Ashgabat", "Turkmenistan", "Central Asia", 37.9601, 58.3261, 93, "PM10"),
    # Middle East
    CityRecord("dubai", "Dubai", "United Arab Emirates", "Middle East", 25.2048, 55.2708, 106, "PM10"),
    CityRecord("abu-dhabi", "Abu Dhabi", "United Arab Emirates", "Middle East", 24.4539, 54.3773, 101, "PM10"),
    CityRecord("riyadh", "Riyadh", "Saudi Arabia", "Middle East", 24.7136, 46.6753, 149, "PM10"),
    CityRecord("jeddah", "Jeddah", "Saudi Arabia", "Middle East", 21.4858, 39.1925, 113, "PM10"),
    CityRecord("doha", "Doha", "Qatar", "Middle East", 25.2854, 51.5310, 115, "PM10"),
    CityRecord("kuwait-city", "Kuwait City", "Kuwait", "Middle East", 29.3759, 47.9774, 141, "PM10"),
    CityRecord("manama", "Manama", "Bahrain", "Middle East", 26.2285, 50.5860, 107, "PM10"),
    CityRecord("muscat", "Muscat", "Oman", "Middle East", 23.5880, 58.3829, 79, "PM10"),
    CityRecord("tehran", "Tehran", "Iran", "Middle East", 35.6892, 51.3890, 146, "PM2.5"),
    CityRecord("isfahan", "Isfahan", "Iran", "Middle East", 32.6546, 51.6680, 132, "PM10"),
    CityRecord("mashhad", "Mashhad", "Iran", "Middle East", 36.2605, 59.6168, 114, "PM2.5"),
    CityRecord("baghdad", "Baghdad", "Iraq", "Middle East", 33.3152, 44.3661, 172, "PM10"),
    CityRecord("basra", "Basra", "Iraq", "Middle East", 30.5085, 47.7804, 154, "PM10"),
    CityRecord("erbil", "Erbil", "Iraq", "Middle East", 36.1911, 44.0092, 116, "PM10"),
    CityRecord("amman", "Amman", "Jordan", "Middle East", 31.9454, 35.9284, 77, "PM10"),
    CityRecord("beirut", "Beirut", "Lebanon", "Middle East", 33.8938, 35.5018, 85, "PM2.5"),
    CityRecord("damascus", "Damascus", "Syria", "Middle East", 33.5138, 36.2765, 105, "PM10"),
    CityRecord("jerusalem", "Jerusalem", "Israel", "Middle East", 31.7683, 35.2137, 58, "O3"),
    CityRecord("tel-aviv", "Tel Aviv", "Israel", "Middle East", 32.0853, 34.7818, 63, "NO2"),
    CityRecord("istanbul", "Istanbul", "Turkey", "Middle East", 41.0082, 28.9784, 73, "PM10"),
    CityRecord("ankara", "Ankara", "Turkey", "Middle East", 39.9334, 32.8597, 69, "PM10"),
    CityRecord("izmir", "Izmir", "Turkey", "Middle East", 38.4237, 27.1428, 61, "PM10"),
    CityRecord("sanaa", "Sana'a", "Yemen", "Middle East", 15.3694, 44.1910, 97, "PM10"),
    CityRecord("nicosia", "Nicosia", "Cyprus", "Middle East", 35.1856, 33.3823, 53, "PM10"),
    CityRecord("tbilisi", "Tbilisi", "Georgia", "Middle East", 41.7151, 44.8271, 68, "PM10"),
    CityRecord("yerevan", "Yerevan", "Armenia", "Middle East", 40.1792, 44.4991, 81, "PM10"),
    CityRecord("baku", "Baku", "Azerbaijan", "Middle East", 40.4093, 49.8671, 66, "NO2"),
    # Africa
    CityRecord("cairo", "Cairo", "Egypt", "Africa", 30.0444, 31.2357, 165, "PM10"),
    CityRecord("alexandria", "Alexandria", "Egypt", "Africa", 31.2001, 29.9187, 112, "PM10"),
    CityRecord("lagos", "Lagos", "Nigeria", "Africa", 6.5244, 3.3792, 143, "PM2.5"),
    CityRecord("abuja", "Abuja", "Nigeria", "Africa", 9.0765, 7.3986, 121, "PM10"),
    CityRecord("kano", "Kano", "Nigeria", "Africa", 12.0022, 8.5920, 168, "PM10"),
    CityRecord("kinshasa", "Kinshasa", "DR Congo", "Africa", -4.4419, 15.2663, 137, "PM2.5"),
    CityRecord("luanda", "Luanda", "Angola", "Africa", -8.8390, 13.2894, 89, "PM2.5"),
    CityRecord("nairobi", "Nairobi", "Kenya", "Africa", -1.2921, 36.8219, 74, "PM2.5"),
    CityRecord("mombasa", "Mombasa", "Kenya", "Africa", -4.0435, 39.6682, 51, "PM10"),
    CityRecord("addis-ababa", "Addis Ababa", "Ethiopia", "Africa", 9.0300, 38.7400, 96, "PM2.5"),
    CityRecord("dar-es-salaam", "Dar es Salaam", "Tanzania", "Africa", -6.7924, 39.2083, 78, "PM2.5"),
    CityRecord("kampala", "Kampala", "Uganda", "Africa", 0.3476, 32.5825, 129, "PM2.5"),
    CityRecord("kigali", "Kigali", "Rwanda", "Africa", -1.9441, 30.0619, 67, "PM2.5"),
    CityRecord("khartoum", "Khartoum", "Sudan", "Africa", 15.5007, 32.5599, 161, "PM10"),
    CityRecord("accra", "Accra", "Ghana", "Africa", 5.6037, -0.1870, 118, "PM2.5"),
    CityRecord("kumasi", "Kumasi", "Ghana", "Africa", 6.6885, -1.6244, 102, "PM2.5"),
    CityRecord("abidjan", "Abidjan", "Ivory Coast", "Africa", 5.3600, -4.0083, 94, "PM2.5"),
    CityRecord("dakar", "Dakar", "Senegal", "Africa", 14.7167, -17.4677, 124, "PM10"),
    CityRecord("bamako", "Bamako", "Mali", "Africa", 12.6392, -8.0029, 153, "PM10"),
    CityRecord("ouagadougou", "Ouagadougou", "Burkina Faso", "Africa", 12.3714, -1.5197, 147, "PM10"),
    CityRecord("niamey", "Niamey", "Niger", "Africa", 13.5116, 2.1254, 162, "PM10"),
    CityRecord("ndjamena", "N'Djamena", "Chad", "Africa", 12.1348, 15.0557, 174, "PM10"),
    CityRecord("douala", "Douala", "Cameroon", "Africa", 4.0511, 9.7679, 106, "PM2.5"),
    CityRecord("yaounde", "Yaounde", "Cameroon", "Africa", 3.8480, 11.5021, 98, "PM2.5"),
    CityRecord("johannesburg", "Johannesburg", "South Africa", "Africa", -26.2041, 28.0473, 87, "PM2.5"),
    CityRecord("cape-town", "Cape Town", "South Africa", "Africa", -33.9249, 18.4241, 39, "NO2"),
    CityRecord("durban", "Durban", "South Africa", "Africa", -29.8587, 31.0218, 57, "PM10"),
    CityRecord("pretoria", "Pretoria", "South Africa", "Africa", -25.7479, 28.2293, 82, "PM2.5"),
    CityRecord("harare", "Harare", "Zimbabwe", "Africa", -17.8252, 31.0335, 71, "PM2.5"),
    CityRecord("lusaka", "Lusaka", "Zambia", "Africa", -15.3875, 28.3228, 76, "PM2.5"),
    CityRecord("maputo", "Maputo", "Mozambique", "Africa", -25.9692, 32.5732, 62, "PM2.5"),
    CityRecord("antananarivo", "Antananarivo", "Madagascar", "Africa", -18.8792, 47.5079, 84, "PM2.5"),
    CityRecord("casablanca", "Casablanca", "Morocco", "Africa", 33.5731, -7.5898, 79, "PM10"),
    CityRecord("rabat", "Rabat", "Morocco", "Africa", 34.0209, -6.8416, 64, "PM10"),
    CityRecord("algiers", "Algiers", "Algeria", "Africa", 36.7538, 3.0588, 88, "PM10"),
    CityRecord("tunis", "Tunis", "Tunisia", "Africa", 36.8065, 10.1815, 83, "PM10"),
    CityRecord("tripoli", "Tripoli", "Libya", "Africa", 32.8872, 13.1913, 99, "PM10"),
    CityRecord("windhoek", "Windhoek", "Namibia", "Africa", -22.5609, 17.0658, 36, "PM10"),
    CityRecord("gaborone", "Gaborone", "Botswana", "Africa", -24.6282, 25.9231, 49, "PM10"),
    # Europe
    CityRecord("london", "London", "United Kingdom", "Europe", 51.5074, -0.1278, 46, "NO2"),
    CityRecord("manchester", "Manchester", "United Kingdom", "Europe", 53.4808, -2.2426, 41, "NO2"),
    CityRecord("birmingham", "Birmingham", "United Kingdom", "Europe", 52.4862, -1.8904, 43, "NO2"),
    CityRecord("glasgow", "Glasgow", "United Kingdom", "Europe", 55.8642, -4.2518, 32, "NO2"),
    CityRecord("dublin", "Dublin", "Ireland", "Europe", 53.3498, -6.2603, 27, "PM2.5"),
    CityRecord("paris", "Paris", "France", "Europe", 48.8566, 2.3522, 52, "NO2"),
    CityRecord("lyon", "Lyon", "France", "Europe", 45.7640, 4.8357, 49, "O3"),
    CityRecord("marseille", "Marseille", "France", "Europe", 43.2965, 5.3698, 55, "O3"),
    CityRecord("berlin", "Berlin", "Germany", "Europe", 52.5200, 13.4050, 38, "NO2"),
    CityRecord("munich", "Munich", "Germany", "Europe", 48.1351, 11.5820, 35, "NO2"),
    CityRecord("hamburg", "Hamburg", "Germany", "Europe", 53.5511, 9.9937, 33, "NO2"),
    CityRecord("frankfurt", "Frankfurt", "Germany", "Europe", 50.1109, 8.6821, 40, "NO2"),
    CityRecord("cologne", "Cologne", "Germany", "Europe", 50.9375, 6.9603, 42, "NO2"),
    CityRecord("amsterdam", "Amsterdam", "Netherlands", "Europe", 52.3676, 4.9041, 39, "NO2"),
    CityRecord("rotterdam", "Rotterdam", "Netherlands", "Europe", 51.9244, 4.4777, 47, "NO2"),
    CityRecord("brussels", "Brussels", "Belgium", "Europe", 50.8503, 4.3517, 44, "NO2"),
    CityRecord("luxembourg", "Luxembourg", "Luxembourg", "Europe", 49.6116, 6.1319, 29, "O3"),
    CityRecord("zurich", "Zurich", "Switzerland", "Europe", 47.3769, 8.5417, 26, "O3"),
    CityRecord("geneva", "Geneva", "Switzerland", "Europe", 46.2044, 6.1432, 31, "O3"),
    CityRecord("vienna", "Vienna", "Austria", "Europe", 48.2082, 16.3738, 37, "PM10"),
    CityRecord("prague", "Prague", "Czech Republic", "Europe", 50.0755, 14.4378, 48, "PM10"),
    CityRecord("warsaw", "Warsaw", "Poland", "Europe", 52.2297, 21.0122, 58, "PM2.5"),
    CityRecord("krakow", "Krakow", "Poland", "Europe", 50.0647, 19.9450, 77, "PM2.5"),
    CityRecord("budapest", "Budapest", "Hungary", "Europe", 47.4979, 19.0402, 54, "PM10"),
    CityRecord("bratislava", "Bratislava", "Slovakia", "Europe", 48.1486, 17.1077, 45, "PM10"),
    CityRecord("ljubljana", "Ljubljana", "Slovenia", "Europe", 46.0569, 14.5058, 42, "PM10"),
    CityRecord("zagreb", "Zagreb", "Croatia", "Europe", 45.8150, 15.9819, 47, "PM10"),
    CityRecord("belgrade", "Belgrade", "Serbia", "Europe", 44.7866, 20.4489, 79, "PM2.5"),
    CityRecord("sarajevo", "Sarajevo", "Bosnia and Herzegovina", "Europe", 43.8563, 18.4131, 112, "PM2.5"),
    CityRecord("skopje", "Skopje", "North Macedonia", "Europe", 41.9981, 21.4254, 121, "PM2.5"),
    CityRecord("tirana", "Tirana", "Albania", "Europe", 41.3275, 19.8187, 63, "PM10"),
    CityRecord("sofia", "Sofia", "Bulgaria", "Europe", 42.6977, 23.3219, 66, "PM10"),
    CityRecord("bucharest", "Bucharest", "Romania", "Europe", 44.4268, 26.1025, 68, "PM10"),
    CityRecord("chisinau", "Chisinau", "Moldova", "Europe", 47.0105, 28.8638, 51, "PM10"),
    CityRecord("kyiv", "Kyiv", "Ukraine", "Europe", 50.4501, 30.5234, 57, "PM2.5"),
    CityRecord("minsk", "Minsk", "Belarus", "Europe", 53.9006, 27.5590, 43, "PM10"),
    CityRecord("vilnius", "Vilnius", "Lithuania", "Europe", 54.6872, 25.2797, 34, "PM10"),
    CityRecord("riga", "Riga", "Latvia", "Europe", 56.9496, 24.1052, 36, "PM10"),
    CityRecord("tallinn", "Tallinn", "Estonia", "Europe", 59.4370, 24.7536, 22, "PM10"),
    CityRecord("helsinki", "Helsinki", "Finland", "Europe", 60.1699, 24.9384, 19, "O3"),
    CityRecord("stockholm", "Stockholm", "Sweden", "Europe", 59.3293, 18.0686, 21, "O3"),
    CityRecord("gothenburg", "Gothenburg", "Sweden", "Europe", 57.7089, 11.9746, 24, "NO2"),
    CityRecord("oslo", "Oslo", "Norway", "Europe", 59.9139, 10.7522, 23, "NO2"),
    CityRecord("copenhagen", "Copenhagen", "Denmark", "Europe", 55.6761, 12.5683, 28, "NO2"),
    CityRecord("reykjavik", "Reykjavik", "Iceland", "Europe", 64.1466, -21.9426, 14, "O3"),
    CityRecord("madrid", "Madrid", "Spain", "Europe", 40.4168, -3.7038, 51, "NO2"),
    CityRecord("barcelona", "Barcelona", "Spain", "Europe", 41.3851, 2.1734, 53, "NO2"),
    CityRecord("valencia", "Valencia", "Spain", "Europe", 39.4699, -0.3763, 44, "O3"),
    CityRecord("seville", "Seville", "Spain", "Europe", 37.3891, -5.9845, 49, "O3"),
    CityRecord("lisbon", "Lisbon", "Portugal", "Europe", 38.7223, -9.1393, 35, "NO2"),
    CityRecord("porto", "Porto", "Portugal", "Europe", 41.1579, -8.6291, 33, "PM10"),
    CityRecord("rome", "Rome", "Italy", "Europe", 41.9028, 12.4964, 50, "NO2"),
    CityRecord("milan", "Milan", "Italy", "Europe", 45.4642, 9.1900, 74, "PM2.5"),
    CityRecord("turin", "Turin", "Italy", "Europe", 45.0703, 7.6869, 71, "PM2.5"),
    CityRecord("naples", "Naples", "Italy", "Europe", 40.8518, 14.2681, 56, "PM10"),
    CityRecord("athens", "Athens", "Greece", "Europe", 37.9838, 23.7275, 59, "O3"),
    CityRecord("thessaloniki", "Thessaloniki", "Greece", "Europe", 40.6401, 22.9444, 62, "PM10"),
    CityRecord("valletta", "Valletta", "Malta", "Europe", 35.8989, 14.5146, 38, "PM10"),
    CityRecord("moscow", "Moscow", "Russia", "Europe", 55.7558, 37.6173, 61, "NO2"),
    CityRecord("saint-petersburg", "Saint Petersburg", "Russia", "Europe", 59.9311, 30.3609, 48, "NO2"),
    CityRecord("novosibirsk", "Novosibirsk", "Russia", "Central Asia", 55.0084, 82.9357, 84, "PM2.5"),
    CityRecord("yekaterinburg", "Yekaterinburg", "Russia", "Europe", 56.8389, 60.6057, 73, "PM2.5"),
    # North America
    CityRecord("new-york", "New York", "United States", "North America", 40.7128, -74.0060, 45, "PM2.5"),
    CityRecord("los-angeles", "Los Angeles", "United States", "North America", 34.0522, -118.2437, 89, "O3"),
    CityRecord("chicago", "Chicago", "United States", "North America", 41.8781, -87.6298, 52, "PM2.5"),
    CityRecord("houston", "Houston", "United States", "North America", 29.7604, -95.3698, 67, "O3"),
    CityRecord("phoenix", "Phoenix", "United States", "North America", 33.4484, -112.0740, 78, "O3"),
    CityRecord("philadelphia", "Philadelphia", "United States", "North America", 39.9526, -75.1652, 49, "PM2.5"),
    CityRecord("san-antonio", "San Antonio", "United States", "North America", 29.4241, -98.4936, 54, "O3"),
    CityRecord("san-diego", "San Diego", "United States", "North America", 32.7157, -117.1611, 57, "O3"),
    CityRecord("dallas", "Dallas", "United States", "North America", 32.7767, -96.7970, 61, "O3"),
    CityRecord("san-jose", "San Jose", "United States", "North America", 37.3382, -121.8863, 43, "PM2.5"),
    CityRecord("san-francisco", "San Francisco", "United States", "North America", 37.7749, -122.4194, 38, "PM2.5"),
    CityRecord("seattle", "Seattle", "United States", "North America", 47.6062, -122.3321, 34, "PM2.5"),
    CityRecord("denver", "Denver", "United States", "North America", 39.7392, -104.9903, 63, "O3"),
    CityRecord("salt-lake-city", "Salt Lake City", "United States", "North America", 40.7608, -111.8910, 72, "PM2.5"),
    CityRecord("atlanta", "Atlanta", "United States", "North America", 33.7490, -84.3880, 55, "O3"),
    CityRecord("miami", "Miami", "United States", "North America", 25.7617, -80.1918, 36, "O3"),
    CityRecord("boston", "Boston", "United States", "North America", 42.3601, -71.0589, 39, "PM2.5"),
    CityRecord("washington", "Washington", "United States", "North America", 38.9072, -77.0369, 47, "PM2.5"),
    CityRecord("detroit", "Detroit", "United States", "North America", 42.3314, -83.0458, 58, "PM2.5"),
    CityRecord("fresno", "Fresno", "United States", "North America", 36.7378, -119.7871, 94, "PM2.5"),
    CityRecord("bakersfield", "Bakersfield", "United States", "North America", 35.3733, -119.0187, 101, "PM2.5"),
    CityRecord("anchorage", "Anchorage", "United States", "North America", 61.2181, -149.9003, 18, "PM10"),
    CityRecord("honolulu", "Honolulu", "United States", "Oceania", 21.3069, -157.8583, 21, "O3"),
    CityRecord("toronto", "Toronto", "Canada", "North America", 43.6532, -79.3832, 37, "O3"),
    CityRecord("montreal", "Montreal", "Canada", "North America", 45.5017, -73.5673, 35, "PM2.5"),
    CityRecord("vancouver", "Vancouver", "Canada", "North America", 49.2827, -123.1207, 29, "PM2.5"),
    CityRecord("calgary", "Calgary", "Canada", "North America", 51.0447, -114.0719, 33, "PM2.5"),
    CityRecord("ottawa", "Ottawa", "Canada", "North America", 45.4215, -75.6972, 28, "O3"),
    CityRecord("edmonton", "Edmonton", "Canada", "North America", 53.5461, -113.4938, 41, "PM2.5"),
    CityRecord("winnipeg", "Winnipeg", "Canada", "North America", 49.8951, -97.1384, 26, "PM2.5"),
    CityRecord("mexico-city", "Mexico City", "Mexico", "North America", 19.4326, -99.1332, 109, "O3"),
    CityRecord("guadalajara", "Guadalajara", "Mexico", "North America", 20.6597, -103.3496, 86, "PM10"),
    CityRecord("monterrey", "Monterrey", "Mexico", "North America", 25.6866, -100.3161, 104, "PM10"),
    CityRecord("tijuana", "Tijuana", "Mexico", "North America", 32.5149, -117.0382, 73, "PM10"),
    CityRecord("puebla", "Puebla", "Mexico", "North America", 19.0414, -98.2063, 81, "PM10"),
    # Latin America
    CityRecord("guatemala-city", "Guatemala City", "Guatemala", "Latin America", 14.6349, -90.5069, 92, "PM2.5"),
    CityRecord("san-salvador", "San Salvador", "El Salvador", "Latin America", 13.6929, -89.2182, 77, "PM2.5"),
    CityRecord("tegucigalpa", "Tegucigalpa", "Honduras", "Latin America", 14.0723, -87.1921, 114, "PM2.5"),
    CityRecord("managua", "Managua", "Nicaragua", "Latin America", 12.1150, -86.2362, 69, "PM2.5"),
    CityRecord("san-jose-cr", "San Jose", "Costa Rica", "Latin America", 9.9281, -84.0907, 44, "PM2.5"),
    CityRecord("panama-city", "Panama City", "Panama", "Latin America", 8.9824, -79.5199, 52, "PM2.5"),
    CityRecord("havana", "Havana", "Cuba", "Latin America", 23.1136, -82.3666, 48, "PM10"),
    CityRecord("santo-domingo", "Santo Domingo", "Dominican Republic", "Latin America", 18.4861, -69.9312, 59, "PM2.5"),
    CityRecord("san-juan", "San Juan", "Puerto Rico", "Latin America", 18.4655, -66.1057, 32, "PM10"),
    CityRecord("kingston", "Kingston", "Jamaica", "Latin America", 17.9712, -76.7936, 46, "PM10"),
    CityRecord("port-au-prince", "Port-au-Prince", "Haiti", "Latin America", 18.5944, -72.3074, 97, "PM2.5"),
    CityRecord("bogota", "Bogota", "Colombia", "Latin America", 4.7110, -74.0721, 78, "PM2.5"),
    CityRecord("medellin", "Medellin", "Colombia", "Latin America", 6.2442, -75.5812, 74, "PM2.5"),
    CityRecord("cali", "Cali", "Colombia", "Latin America", 3.4516, -76.5320, 58, "PM2.5"),
    CityRecord("caracas", "Caracas", "Venezuela", "Latin America", 10.4806, -66.9036, 66, "PM2.5"),
    CityRecord("quito", "Quito", "Ecuador", "Latin America", -0.1807, -78.4678, 63, "PM2.5"),
    CityRecord("guayaquil", "Guayaquil", "Ecuador", "Latin America", -2.1710, -79.9224, 57, "PM10"),
    CityRecord("lima", "Lima", "Peru", "Latin America", -12.0464, -77.0428, 103, "PM2.5"),
    CityRecord("arequipa", "Arequipa", "Peru", "Latin America", -16.4090, -71.5375, 71, "PM10"),
    CityRecord("la-paz", "La Paz", "Bolivia", "Latin America", -16.4897, -68.1193, 68, "PM10"),
    CityRecord("santa-cruz", "Santa Cruz de la Sierra", "Bolivia", "Latin America", -17.8146, -63.1561, 88, "PM2.5"),
    CityRecord("santiago", "Santiago", "Chile", "Latin America", -33.4489, -70.6693, 96, "PM2.5"),
    CityRecord("valparaiso", "Valparaiso", "Chile", "Latin America", -33.0472, -71.6127, 47, "PM10"),
    CityRecord("buenos-aires", "Buenos Aires", "Argentina", "Latin America", -34.6037, -58.3816, 54, "NO2"),
    CityRecord("cordoba", "Cordoba", "Argentina", "Latin America", -31.4201, -64.1888, 49, "PM10"),
    CityRecord("rosario", "Rosario", "Argentina", "Latin America", -32.9442, -60.6505, 45, "PM10"),
    CityRecord("montevideo", "Montevideo", "Uruguay", "Latin America", -34.9011, -56.1645, 31, "PM10"),
    CityRecord("asuncion", "Asuncion", "Paraguay", "Latin America", -25.2637, -57.5759, 72, "PM2.5"),
    CityRecord("sao-paulo", "Sao Paulo", "Brazil", "Latin America", -23.5505, -46.6333, 82, "O3"),
    CityRecord("rio-de-janeiro", "Rio de Janeiro", "Brazil", "Latin America", -22.9068, -43.1729, 64, "O3"),
    CityRecord("brasilia", "Brasilia", "Brazil", "Latin America", -15.7975, -47.8919, 42, "PM10"),
    CityRecord("belo-horizonte", "Belo Horizonte", "Brazil", "Latin America", -19.9167, -43.9345, 58, "PM10"),
    CityRecord("salvador", "Salvador", "Brazil", "Latin America", -12.9777, -38.5016, 37, "PM10"),
    CityRecord("fortaleza", "Fortaleza", "Brazil", "Latin America", -3.7319, -38.5267, 34, "PM10"),
    CityRecord("recife", "Recife", "Brazil", "Latin America", -8.0476, -34.8770, 39, "PM10"),
    CityRecord("manaus", "Manaus", "Brazil", "Latin America", -3.1190, -60.0217, 93, "PM2.5"),
    CityRecord("porto-alegre", "Porto Alegre", "Brazil", "Latin America", -30.0346, -51.2177, 46, "PM10"),
    CityRecord("curitiba", "Curitiba", "Brazil", "Latin America", -25.4284, -49.2733, 41, "PM10"),
    # Oceania
    CityRecord("sydney", "Sydney", "Australia", "Oceania", -33.8688, 151.2093, 32, "PM2.5"),
    CityRecord("melbourne", "Melbourne", "Australia", "Oceania", -37.8136, 144.9631, 29, "PM2.5"),
    CityRecord("brisbane", "Brisbane", "Australia", "Oceania", -27.4698, 153.0251, 27, "O3"),
    CityRecord("perth", "Perth", "Australia", "Oceania", -31.9505, 115.8605, 25, "O3"),
    CityRecord("adelaide", "Adelaide", "Australia", "Oceania", -34.9285, 138.6007, 23, "PM10"),
    CityRecord("canberra", "Canberra", "Australia", "Oceania", -35.2809, 149.1300, 19, "PM2.5"),
    CityRecord("darwin", "Darwin", "Australia", "Oceania", -12.4634, 130.8456, 35, "PM2.5"),
    CityRecord("hobart", "Hobart", "Australia", "Oceania", -42.8821, 147.3272, 16, "PM2.5"),
    CityRecord("auckland", "Auckland", "New Zealand", "Oceania", -36.8485, 174.7633, 22, "PM2.5"),
    CityRecord("wellington", "Wellington", "New Zealand", "Oceania", -41.2865, 174.7762, 15, "PM10"),
    CityRecord("christchurch", "Christchurch", "New Zealand", "Oceania", -43.5321, 172.6362, 33, "PM2.5"),
    CityRecord("port-moresby", "Port Moresby", "Papua New Guinea", "Oceania", -9.4438, 147.1803, 38, "PM10"),
    CityRecord("suva", "Suva", "Fiji", "Oceania", -18.1416, 178.4419, 17, "PM10"),
    CityRecord("noumea", "Noumea", "New Caledonia", "Oceania", -22.2758, 166.4580, 20, "PM10"),
)

# Curated default watch-list shown before a user picks their own cities.
DEFAULT_TRACKED_CITY_IDS: Tuple[str, ...] = (
    "delhi",
    "beijing",
    "london",
    "new-york",
    "sao-paulo",
    "lagos",
    "tokyo",
    "sydney",
)
